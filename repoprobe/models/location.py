"""Git remote location model.

Parses the location forms git accepts for a remote (scheme URLs, SCP-style
shorthand and local paths) into a normalized, comparable value that can be
rendered without credentials.
"""

from __future__ import annotations

import re
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from repoprobe.errors import LocationParseError

KNOWN_SCHEMES = frozenset(
    {"ssh", "git", "git+ssh", "ssh+git", "http", "https", "ftp", "ftps", "rsync", "file"}
)

# user@host:path, host:path. A path starting with a backslash is a Windows path.
_SCP_PATTERN = re.compile(r"^(?:(?P<user>[^@\s]+)@)?(?P<host>[^:/\s@]+):(?P<path>[^\\].*)$")
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_INVALID_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


def comparison_path(path: str) -> str:
    """Return the path used to compare two locations.

    Strips one leading ``/`` and one trailing ``.git``. SCP-style locations
    (``git@github.com:okteto/movies.git``) carry no leading slash and the
    ``.git`` suffix is optional for every host, so both are dropped.
    """
    return path.removeprefix("/").removesuffix(".git")


class RepositoryLocation(BaseModel):
    """Normalized git remote location."""

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(..., description="Transport scheme (https, ssh, file...)")
    host: str = Field(default="", description="Hostname, without port")
    port: int | None = None
    path: str = Field(default="", description="Path exactly as parsed")
    username: str | None = None
    password: str | None = Field(default=None, repr=False)

    @property
    def netloc(self) -> str:
        """Host and port, without credentials."""
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"

    def anonymized(self) -> str:
        """Render the location without credentials, query or fragment."""
        path = self.path
        if path and self.host and not path.startswith("/"):
            path = f"/{path}"
        return f"{self.scheme}://{self.netloc}{path}"

    def is_equal_to(self, other: RepositoryLocation | None) -> bool:
        """Check whether both locations point to the same repository.

        Hostnames are compared exactly; ports, credentials and scheme are
        ignored.
        """
        if other is None:
            return False
        if self.host != other.host:
            return False
        return comparison_path(self.path) == comparison_path(other.path)

    def __str__(self) -> str:
        return self.anonymized()


def _split_host_port(hostport: str, raw: str) -> tuple[str, int | None]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise LocationParseError(f"invalid IPv6 host in {raw!r}")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        if not rest:
            return host, None
        if not rest.startswith(":"):
            raise LocationParseError(f"invalid host in {raw!r}")
        port_text = rest[1:]
    else:
        host, sep, port_text = hostport.partition(":")
        if not sep:
            return host, None
    if not port_text:
        return host, None
    if not port_text.isdigit() or int(port_text) > 65535:
        raise LocationParseError(f"invalid port {port_text!r} in {raw!r}")
    return host, int(port_text)


def _parse_scheme_url(raw: str) -> RepositoryLocation:
    try:
        parts = urlsplit(raw)
    except ValueError as e:
        raise LocationParseError(f"invalid url {raw!r}: {e}") from e

    scheme = parts.scheme.lower()
    if scheme not in KNOWN_SCHEMES:
        raise LocationParseError(f"unsupported scheme {parts.scheme!r} in {raw!r}")

    userinfo, _, hostport = parts.netloc.rpartition("@")
    host, port = _split_host_port(hostport, raw)
    if not host and scheme != "file":
        raise LocationParseError(f"missing host in {raw!r}")

    username: str | None = None
    password: str | None = None
    if userinfo:
        user, sep, secret = userinfo.partition(":")
        username = unquote(user)
        password = unquote(secret) if sep else None

    return RepositoryLocation(
        scheme=scheme,
        host=host,
        port=port,
        path=unquote(parts.path),
        username=username,
        password=password,
    )


def parse_location(raw: str) -> RepositoryLocation:
    """Parse a git remote location.

    Accepts ``scheme://[user[:pass]@]host[:port]/path``, SCP-style
    ``[user@]host:path`` (rewritten to ``ssh`` with the path kept verbatim)
    and local filesystem paths (``file`` scheme, empty host).

    Raises:
        LocationParseError: if the input matches none of these forms.
    """
    text = raw.strip()
    if not text:
        raise LocationParseError("empty repository location")
    if _INVALID_CHARS.search(text):
        raise LocationParseError(f"invalid characters in {raw!r}")

    if _SCHEME_PATTERN.match(text):
        return _parse_scheme_url(text)

    match = _SCP_PATTERN.match(text)
    # Single letter hosts are Windows drive letters (C:/repo)
    if match and len(match.group("host")) > 1:
        username, password = match.group("user"), None
        if username is not None and ":" in username:
            username, password = username.split(":", 1)
        return RepositoryLocation(
            scheme="ssh",
            host=match.group("host"),
            path=match.group("path"),
            username=username,
            password=password,
        )

    if "://" in text:
        raise LocationParseError(f"invalid url {raw!r}")
    return RepositoryLocation(scheme="file", path=text)
