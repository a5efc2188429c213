from owner_resolver.config.settings import Settings
from owner_resolver.directory.base import BaseDirectoryResolver
from owner_resolver.directory.ldap_resolver import LdapDirectoryResolver


class DirectoryResolverFactory:
    """Creates the directory resolver from application settings."""

    @classmethod
    def create(cls, settings: Settings) -> BaseDirectoryResolver:
        return LdapDirectoryResolver(
            url=settings.ldap_url,
            bind_dn=settings.ldap_bind_dn,
            bind_password=settings.ldap_bind_pass,
            base_dn=settings.ldap_base_dn,
        )
