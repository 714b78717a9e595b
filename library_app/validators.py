from typing import Optional


class TextValidator:
    """Checks for the free-text fields of a book."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return text is None or not text.strip()

    @staticmethod
    def has_line_break(text: Optional[str]) -> bool:
        if text is None:
            return False
        return "\n" in text or "\r" in text

    @staticmethod
    def validate_field(name: str, text: Optional[str]) -> str:
        """Return the stripped value or raise ValueError."""
        if TextValidator.is_blank(text):
            raise ValueError(f"{name} cannot be empty.")
        if TextValidator.has_line_break(text):
            raise ValueError(f"{name} cannot contain line breaks.")
        return text.strip()

    @staticmethod
    def validate_title(title: Optional[str]) -> str:
        return TextValidator.validate_field("Title", title)

    @staticmethod
    def validate_author(author: Optional[str]) -> str:
        return TextValidator.validate_field("Author", author)


class IdValidator:
    """Parsing of book ids typed at a prompt."""

    @staticmethod
    def parse_id(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        if not s:
            return None
        try:
            return int(s)
        except ValueError:
            return None
