from pathlib import Path
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_UPLOAD_NAME = "upload.jpg"


class FileReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: Path


class InMemoryBytes(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bytes"] = "bytes"
    data: bytes
    filename: Optional[str] = None

    @property
    def upload_name(self) -> str:
        return self.filename or DEFAULT_UPLOAD_NAME


ImageSource = Annotated[Union[FileReference, InMemoryBytes], Field(discriminator="kind")]


class RecognitionRequest(BaseModel):
    """
    One image submission. regions=None means "not given" and falls back to
    the client's default regions; an empty tuple means no region filter.
    """
    model_config = ConfigDict(frozen=True)

    image: ImageSource
    regions: Optional[Tuple[str, ...]] = None
    mmc: bool = False
    camera_id: Optional[str] = None

    @classmethod
    def from_path(cls, path: Union[str, Path], **kwargs) -> "RecognitionRequest":
        return cls(image=FileReference(path=Path(path)), **kwargs)

    @classmethod
    def from_bytes(cls, data: bytes, filename: Optional[str] = None, **kwargs) -> "RecognitionRequest":
        return cls(image=InMemoryBytes(data=data, filename=filename), **kwargs)
