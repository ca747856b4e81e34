from pydantic import BaseModel, Field


class FileReport(BaseModel):
    """External representation of one formatted file"""

    file_path: str
    mode: str
    modified: bool
    errors: list[str] = Field(default_factory=list)
