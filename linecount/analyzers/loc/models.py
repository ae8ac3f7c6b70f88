from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple


class LineCounts(NamedTuple):
    code: int
    comments: int
    blank: int
    total: int


@dataclass(frozen=True)
class FileRecord:
    path: str
    code: int
    comments: int
    blank: int
    total: int

    @classmethod
    def empty(cls, path: str) -> "FileRecord":
        return cls(path=path, code=0, comments=0, blank=0, total=0)

    def as_dict(self) -> Dict[str, object]:
        return {
            "path": self.path,
            "code": self.code,
            "comments": self.comments,
            "blank": self.blank,
            "total": self.total,
        }


@dataclass
class ScanResult:
    # code + comments + blank may exceed total: mixed lines count twice
    files: List[FileRecord] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def code(self) -> int:
        return sum(f.code for f in self.files)

    @property
    def comments(self) -> int:
        return sum(f.comments for f in self.files)

    @property
    def blank(self) -> int:
        return sum(f.blank for f in self.files)

    @property
    def total(self) -> int:
        return sum(f.total for f in self.files)

    def as_dict(self) -> Dict[str, int]:
        return {
            "files": self.total_files,
            "code": self.code,
            "comments": self.comments,
            "blank": self.blank,
            "total": self.total,
        }
