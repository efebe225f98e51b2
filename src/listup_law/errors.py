"""
listup_law の例外定義

ファイル単位で発生するエラーは ListupLawFileError を継承し、
ビルダーはそのファイルだけをスキップして処理を続ける。
CorpusIOError だけが実行全体を中断する。
"""
from pathlib import Path
from typing import Optional, Union


class ListupLawError(Exception):
    """Base class for all listup_law errors."""


class ListupLawFileError(ListupLawError):
    """A problem scoped to a single corpus file; the scan continues."""

    reason = "error"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None

    def with_path(self, path: Union[str, Path]) -> "ListupLawFileError":
        self.path = str(path)
        return self


class FilenamePatternMismatch(ListupLawFileError):
    reason = "filename_pattern_mismatch"

    def __init__(self, name: str):
        super().__init__(f"File name does not match <id>_<YYYYMMDD>_<patch>.xml: {name}", name)
        self.name = name


class UnrecognizedEra(ListupLawFileError):
    reason = "unrecognized_era"

    def __init__(self, value: str):
        super().__init__(f"Unrecognized era: {value!r}")
        self.value = value


class DateOutOfRange(ListupLawFileError):
    reason = "date_out_of_range"

    def __init__(self, year: int, month: int, day: int):
        super().__init__(f"Date precedes the Meiji era: {year:04d}-{month:02d}-{day:02d}")
        self.year = year
        self.month = month
        self.day = day


class MissingRequiredField(ListupLawFileError):
    """Raised internally when Law/Era/Year is absent; extractors report it as no data."""

    reason = "missing_required_field"

    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class InvalidFieldValue(ListupLawFileError):
    reason = "invalid_field_value"

    def __init__(self, field: str, value: str):
        super().__init__(f"Invalid value for {field}: {value!r}")
        self.field = field
        self.value = value


class EncodingError(ListupLawFileError):
    reason = "encoding_error"


class XmlParseError(ListupLawFileError):
    reason = "xml_parse_error"


class RegistryLookupMiss(ListupLawFileError):
    reason = "registry_lookup_miss"

    def __init__(self, law_num: str):
        super().__init__(f"Not Found LawId: {law_num}")
        self.law_num = law_num


class CorpusIOError(ListupLawError):
    """Directory or file inaccessible. Aborts the run."""
