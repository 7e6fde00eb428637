"""AWS credential resolution from shared config profiles."""

from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError

from ..domain.host import Credential
from ..domain.interfaces import CredentialResolver, Logger


class ProfileCredentialResolver(CredentialResolver):
    """Treats credential identifiers as AWS shared config profile names."""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger

    def resolve(self, credentials_id: Optional[str]) -> Optional[Credential]:
        """Resolve a profile to its credentials.

        Returns None for an empty id, an unknown profile or a profile without
        credentials, in which case the default credential chain applies.
        """
        if not credentials_id:
            return None

        if credentials_id not in self.list_credential_ids():
            self._warn("Unknown credentials id, using default credentials", credentials_id)
            return None

        try:
            credentials = boto3.session.Session(profile_name=credentials_id).get_credentials()
        except BotoCoreError as e:
            self._warn("Cannot load credentials, using default credentials", credentials_id, e)
            return None

        if credentials is None:
            self._warn("Profile has no credentials, using default credentials", credentials_id)
            return None

        frozen = credentials.get_frozen_credentials()
        return Credential(
            access_key_id=frozen.access_key,
            secret_access_key=frozen.secret_key,
            session_token=frozen.token,
        )

    def list_credential_ids(self) -> List[str]:
        """Sorted names of the configured profiles."""
        return sorted(boto3.session.Session().available_profiles)

    def _warn(self, message: str, credentials_id: str, error: Optional[Exception] = None) -> None:
        if self.logger is None:
            return
        if error is None:
            self.logger.warning(message, credentials_id=credentials_id)
        else:
            self.logger.warning(message, credentials_id=credentials_id, error=str(error))
