"""Application services that combine policies with their collaborators."""

from credpolicy.application.services.credential_service import CredentialService

__all__ = ["CredentialService"]
