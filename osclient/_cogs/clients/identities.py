from typing import Protocol, Tuple

from osclient._cogs.clients import resources
from osclient._cogs.structs import bodies, references

HTTP_CREATED_CODE = 201


class UserInterface(resources.GetInterface, Protocol):
    pass


class UserIdentityMappingInterface(resources.GetInterface, Protocol):
    async def create_or_update(self, body: bodies.RawInput) -> Tuple[bodies.RawBody, bool]: ...


class UsersInterface(Protocol):
    def users(self) -> UserInterface: ...


class UserIdentityMappingsInterface(Protocol):
    def user_identity_mappings(self) -> UserIdentityMappingInterface: ...


class Users(resources.Getter):
    """
    Users are cluster-scoped. The special name ``"~"`` means the current user.
    """
    resource = references.USERS


class UserIdentityMappings(resources.Getter):
    resource = references.USER_IDENTITY_MAPPINGS

    async def create_or_update(self, body: bodies.RawInput) -> Tuple[bodies.RawBody, bool]:
        """
        Store the mapping of an identity to a user, creating it if absent.

        Returns the stored mapping and whether it was created (not updated).
        """
        url = self.get_url(name=bodies.get_name(body))
        response = await self.transport.request('put', url, payload=body)
        async with response:
            result: bodies.RawBody = self.transport.codec.decode(await response.read())
            return result, response.status == HTTP_CREATED_CODE
