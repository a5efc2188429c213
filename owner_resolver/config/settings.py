from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    ldap_url: str = "ldap://localhost:389"
    ldap_bind_dn: str = "cn=admin,dc=example,dc=com"
    ldap_bind_pass: str = "admin"
    ldap_base_dn: str = "dc=example,dc=com"

    uid_reader: str = "os"

    topology: str = "single-stage"
    topology_probe_path: str | None = None
    topology_probe_uid: int | None = None
