import os
from collections.abc import Generator

import pytest

from owner_resolver.directory.exceptions import DirectoryConnectionError
from owner_resolver.directory.ldap_resolver import LdapDirectoryResolver


@pytest.fixture()
def ldap_resolver() -> Generator[LdapDirectoryResolver, None, None]:
    url = os.environ.get("LDAP_TEST_URL")
    if not url:
        pytest.skip("LDAP_TEST_URL not set; start an LDAP server and export LDAP_TEST_*")
    resolver = LdapDirectoryResolver(
        url=url,
        bind_dn=os.environ.get("LDAP_TEST_BIND_DN", "cn=admin,dc=example,dc=com"),
        bind_password=os.environ.get("LDAP_TEST_BIND_PASS", "admin"),
        base_dn=os.environ.get("LDAP_TEST_BASE_DN", "dc=example,dc=com"),
    )
    try:
        resolver.check_connection()
    except DirectoryConnectionError as e:
        pytest.skip(f"LDAP test server not available: {e}")
    try:
        yield resolver
    finally:
        resolver.close()


@pytest.fixture()
def known_user() -> tuple[int, str]:
    """uidNumber and mail of a seeded user, e.g. LDAP_TEST_UID=30001 LDAP_TEST_EMAIL=alice@example.com."""
    uid = os.environ.get("LDAP_TEST_UID")
    email = os.environ.get("LDAP_TEST_EMAIL")
    if not uid or not email:
        pytest.skip("LDAP_TEST_UID / LDAP_TEST_EMAIL not set")
    return int(uid), email
