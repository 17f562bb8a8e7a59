"""File resource accessor."""

from dataclasses import dataclass

from ..decoding import decode
from ..session import RestApi
from ..types import FileInfo
from ._common import encode_title


@dataclass(frozen=True)
class File:
    """A file, identified by its title without the ``File:`` prefix."""

    title: str

    async def get(self, api: RestApi) -> FileInfo:
        """Fetch the file description and its preferred and original URLs."""
        data = await api.fetch_json(f"/file/{encode_title(self.title)}")
        return decode(FileInfo, data)
