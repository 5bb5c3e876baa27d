from dataclasses import asdict, dataclass, field


@dataclass
class ExtractedSignature:
    """A function, method, or class signature found in a source file.

    Line numbers are 1-based and inclusive.
    """
    name: str
    line_start: int
    line_end: int
    parameters: list[str] = field(default_factory=list)
    is_async: bool = False
    is_method: bool = False
    is_class: bool = False
    docstring: str | None = None  # Python family only
    decorators: list[str] = field(default_factory=list)
    complexity: int = 1

    @property
    def line_count(self) -> int:
        """Number of lines spanned by the signature's body."""
        return max(self.line_end - self.line_start, 0) + 1

    def truncated_docstring(self, limit: int = 100) -> str | None:
        """Docstring cut to `limit` characters, with "..." appended when cut."""
        if self.docstring is None:
            return None
        if len(self.docstring) > limit:
            return f"{self.docstring[:limit]}..."
        return self.docstring

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class FileSignatures:
    """All signatures extracted from one file."""
    path: str
    signatures: list[ExtractedSignature] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "signatures": [sig.to_dict() for sig in self.signatures],
        }
