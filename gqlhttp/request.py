from tempfile import SpooledTemporaryFile
from typing import IO, Any, Optional

from werkzeug.wrappers import Request as _Request


DEFAULT_MAX_UPLOAD_MEMORY_SIZE = 10 * 1024 * 1024  # 10MB

#: memory reserved for non-file form fields on top of the upload buffer
FORM_FIELDS_MEMORY_SIZE = 10 * 1024 * 1024  # 10MB


class Request(_Request):
    """Incoming request with a bounded in-memory multipart buffer

    Uploaded file parts are kept in memory until they grow beyond
    ``max_upload_memory_size`` bytes, after that they are rolled over to a
    temporary file. Temporary files are released by :py:meth:`close`.

    Non-file form fields are limited separately, by
    ``max_upload_memory_size`` plus ``FORM_FIELDS_MEMORY_SIZE`` bytes.
    """

    def __init__(
        self,
        environ: dict[str, Any],
        max_upload_memory_size: int = DEFAULT_MAX_UPLOAD_MEMORY_SIZE,
        populate_request: bool = True,
        shallow: bool = False,
    ) -> None:
        super().__init__(
            environ, populate_request=populate_request, shallow=shallow
        )
        self.max_upload_memory_size = max_upload_memory_size
        self.max_form_memory_size = (
            max_upload_memory_size + FORM_FIELDS_MEMORY_SIZE
        )

    def _get_file_stream(
        self,
        total_content_length: Optional[int],
        content_type: Optional[str],
        filename: Optional[str] = None,
        content_length: Optional[int] = None,
    ) -> IO[bytes]:
        return SpooledTemporaryFile(  # type: ignore[return-value]
            max_size=self.max_upload_memory_size, mode="rb+"
        )
