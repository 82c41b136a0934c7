"""
Images and the image repositories, which group the images by tags.
"""
from typing import Protocol

from osclient._cogs.clients import resources
from osclient._cogs.structs import bodies, references


class ImageInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.DeleteInterface,
    Protocol,
):
    pass


class ImageRepositoryInterface(
    resources.ListInterface,
    resources.GetInterface,
    resources.CreateInterface,
    resources.UpdateInterface,
    resources.DeleteInterface,
    resources.WatchInterface,
    Protocol,
):
    pass


class ImageRepositoryMappingInterface(resources.CreateInterface, Protocol):
    pass


class ImageRepositoryTagInterface(Protocol):
    async def get(self, name: str, tag: str) -> bodies.RawBody: ...


class ImagesNamespacer(Protocol):
    def images(self, namespace: references.Namespace = None) -> ImageInterface: ...


class ImageRepositoriesNamespacer(Protocol):
    def image_repositories(
            self, namespace: references.Namespace = None,
    ) -> ImageRepositoryInterface: ...


class ImageRepositoryMappingsNamespacer(Protocol):
    def image_repository_mappings(
            self, namespace: references.Namespace = None,
    ) -> ImageRepositoryMappingInterface: ...


class ImageRepositoryTagsNamespacer(Protocol):
    def image_repository_tags(
            self, namespace: references.Namespace = None,
    ) -> ImageRepositoryTagInterface: ...


class Images(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Deleter,
):
    resource = references.IMAGES


class ImageRepositories(
    resources.Lister,
    resources.Getter,
    resources.Creator,
    resources.Updater,
    resources.Deleter,
    resources.Watcher,
):
    resource = references.IMAGE_REPOSITORIES


class ImageRepositoryMappings(resources.Creator):
    """
    Mappings tag the existing images in the repositories; they are write-only.
    """
    resource = references.IMAGE_REPOSITORY_MAPPINGS


class ImageRepositoryTags(resources.ResourceClient):
    resource = references.IMAGE_REPOSITORY_TAGS

    async def get(self, name: str, tag: str) -> bodies.RawBody:
        """
        Get the image referred by a tag of an image repository.
        """
        url = self.get_url(name=f'{name}:{tag}')
        result: bodies.RawBody = await self.transport.get(url)
        return result
