"""Random dog image model."""

from __future__ import annotations

from pydoggo.models._base import ApiModel


class DogImage(ApiModel):
    """Response of ``GET /breeds/image/random``.

    Parameters
    ----------
    message : str
        URL of the dog picture. The API reuses its generic ``message``
        field for the payload.
    status : str
        API status string, ``"success"`` on a normal response.
    """

    message: str
    status: str

    @property
    def url(self) -> str:
        """Image URL (alias of :attr:`message`)."""
        return self.message
