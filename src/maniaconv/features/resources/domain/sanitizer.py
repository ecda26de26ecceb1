"""Summary: File name sanitization for packed chart resources.
Why: The target game only loads ASCII names without path or wildcard characters.
"""

import re
from typing import ClassVar, final


@final
class Sanitizer:
    """Sanitize resource file names."""

    # Non-ASCII characters and the reserved \ / : * ? " < > |
    PROHIBITED: ClassVar[re.Pattern[str]] = re.compile(r'[^\x00-\x7f]|[\\/:*?"<>|]')

    REPLACEMENT: ClassVar[str] = "_"

    @classmethod
    def sanitize_filename(cls, file_name: str) -> str:
        """Replace every prohibited character with an underscore.

        One character always becomes exactly one underscore, so sanitized
        names keep their length and sanitizing twice changes nothing.

        Args:
            file_name: Bare file name (no directories).

        Returns:
            str: Sanitized file name.
        """
        return cls.PROHIBITED.sub(cls.REPLACEMENT, file_name)


__all__ = ["Sanitizer"]
