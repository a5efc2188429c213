from typing import Any

from ldap3 import BASE, NONE, SUBTREE, Connection, Server
from ldap3.core.exceptions import LDAPException

from owner_resolver.directory.base import BaseDirectoryResolver
from owner_resolver.directory.exceptions import DirectoryConnectionError
from owner_resolver.directory.models import IdentityRecord, ResolutionStatus
from owner_resolver.logging.logger import Log

_RESULT_SUCCESS = 0


class LdapDirectoryResolver(BaseDirectoryResolver):
    """Resolves UIDs to email addresses with an authenticated LDAP search.

    One connection is bound lazily and reused for every lookup in the run.
    """

    UID_ATTRIBUTE = "uidNumber"
    MAIL_ATTRIBUTE = "mail"

    def __init__(
        self,
        *,
        url: str,
        bind_dn: str,
        bind_password: str,
        base_dn: str,
    ) -> None:
        self._url = url
        self._bind_dn = bind_dn
        self._bind_password = bind_password
        self._base_dn = base_dn
        self._conn: Connection | None = None

    def check_connection(self) -> None:
        try:
            conn = self._connection()
            conn.search(
                self._base_dn,
                "(objectClass=*)",
                search_scope=BASE,
                attributes=[],
            )
        except LDAPException as exc:
            raise DirectoryConnectionError(
                f"Cannot connect to LDAP server at {self._url}: {exc}"
            ) from exc
        if conn.result.get("result") != _RESULT_SUCCESS:
            raise DirectoryConnectionError(
                f"Cannot connect to LDAP server at {self._url}: "
                f"{conn.result.get('description')} {conn.result.get('message') or ''}".rstrip()
            )

    def lookup(self, uid: int) -> IdentityRecord:
        search_filter = f"({self.UID_ATTRIBUTE}={int(uid)})"
        try:
            conn = self._connection()
            conn.search(
                self._base_dn,
                search_filter,
                search_scope=SUBTREE,
                attributes=[self.MAIL_ATTRIBUTE],
            )
        except LDAPException as exc:
            Log.warning(f"LDAP query {search_filter} failed: {exc}")
            return IdentityRecord(uid=uid, email=None, status=ResolutionStatus.QUERY_FAILED)

        if conn.result.get("result") != _RESULT_SUCCESS:
            Log.warning(
                f"LDAP query {search_filter} failed: {conn.result.get('description')}"
            )
            return IdentityRecord(uid=uid, email=None, status=ResolutionStatus.QUERY_FAILED)

        entries = [item for item in conn.response or [] if item.get("type") == "searchResEntry"]
        if not entries:
            return IdentityRecord(uid=uid, email=None, status=ResolutionStatus.NO_ENTRY)

        email = self._first_value(entries[0].get("attributes", {}).get(self.MAIL_ATTRIBUTE))
        if not email:
            return IdentityRecord(uid=uid, email=None, status=ResolutionStatus.NO_EMAIL)
        return IdentityRecord(uid=uid, email=email, status=ResolutionStatus.FOUND)

    def close(self) -> None:
        if self._conn is None:
            return
        try:
            self._conn.unbind()
        except LDAPException as exc:
            Log.debug(f"LDAP unbind failed: {exc}")
        finally:
            self._conn = None

    def _connection(self) -> Connection:
        if self._conn is None:
            server = Server(self._url, get_info=NONE)
            self._conn = Connection(
                server,
                user=self._bind_dn,
                password=self._bind_password,
                auto_bind=True,
                read_only=True,
            )
        return self._conn

    @staticmethod
    def _first_value(raw: Any) -> str | None:
        if isinstance(raw, (list, tuple)):
            raw = raw[0] if raw else None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        return str(raw) if raw else None
