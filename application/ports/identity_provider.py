"""
Identity Provider Interface (Port).

Only the stable user identifier of the current principal is consumed by the
data-access layer. Credential exchange lives with the provider.
"""
from typing import Optional, Protocol


class IdentityProvider(Protocol):
    """Source of the signed-in principal."""

    def current_principal_id(self) -> Optional[str]:
        """
        Get the identifier of the signed-in user.

        Returns:
            User ID, or None if nobody is signed in
        """
        ...
