from oneliner_css.models import FormatResult

from .models import FileReport


def format_result_to_file_report(result: FormatResult) -> FileReport:
    """Convert an internal dataclass result to an external Pydantic report"""
    return FileReport(
        file_path=result.file_path,
        mode=result.mode,
        modified=result.modified,
        errors=[error.splitlines()[0] if error else error for error in result.errors],
    )
