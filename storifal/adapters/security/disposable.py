"""
Disposable email policy adapter - Implements DisposableEmailPolicy protocol.

Backed by the blocklist shipped with the ``disposable-email-domains``
package, extended with deployment-specific domains from settings.
"""

from collections.abc import Iterable

from disposable_email_domains import blocklist


class BlocklistDisposablePolicy:
    """
    Implements DisposableEmailPolicy protocol via a domain blocklist.

    Uses structural subtyping - no explicit inheritance from Protocol.
    A subdomain of a blocked domain is blocked too.
    """

    def __init__(self, extra_domains: Iterable[str] = (), base: Iterable[str] | None = None) -> None:
        """
        Args:
            extra_domains: Additional domains to block
            base: Replacement for the packaged blocklist (tests)
        """
        domains = set(blocklist if base is None else base)
        domains.update(d.strip().lower() for d in extra_domains if d.strip())
        self._domains = frozenset(domains)

    def is_disposable(self, email: str) -> bool:
        _, sep, domain = email.rpartition("@")
        if not sep or not domain:
            return False
        labels = domain.strip().lower().rstrip(".").split(".")
        return any(".".join(labels[i:]) in self._domains for i in range(len(labels) - 1))
