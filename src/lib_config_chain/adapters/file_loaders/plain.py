"""Plain text file loader.

Returns file content exactly as stored: decoded as UTF-8 with no newline
translation and no trimming, so ``"value\\r\\n"`` stays ``"value\\r\\n"``.
"""

from __future__ import annotations

from ...domain.errors import InvalidFormat
from ...observability import log_error
from .structured import BaseFileLoader


class PlainFileLoader(BaseFileLoader):
    """Read a whole file as text."""

    def load(self, path: str) -> str:
        """Return the UTF-8 text of *path* verbatim.

        Examples
        --------
        >>> from pathlib import Path
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b'test_content\\n')
        >>> tmp.close()
        >>> PlainFileLoader().load(tmp.name)
        'test_content\\n'
        >>> Path(tmp.name).unlink()
        """

        payload = self._read(path)
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            log_error("config_file_invalid", strategy="text", path=path, format="text", error=str(exc))
            raise InvalidFormat(f"File {path} is not valid UTF-8: {exc}") from exc
