"""Image payload handed from the upload surface to the extractor."""
import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImagePayload:
    data: str  # base64-encoded image bytes
    mime_type: str

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> "ImagePayload":
        return cls(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)

    @classmethod
    def from_upload(cls, file_storage) -> "ImagePayload":
        """Build from a werkzeug FileStorage (the uploaded form field)."""
        return cls.from_bytes(file_storage.read(), file_storage.mimetype)

    @classmethod
    def from_path(cls, path) -> "ImagePayload":
        """Read an image file from disk; mime type is guessed from the extension."""
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        if not mime_type or not mime_type.startswith("image/"):
            raise ValueError(f"{path.name} does not look like an image file")
        return cls.from_bytes(path.read_bytes(), mime_type)

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)
