from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class FileFilter(BaseModel):
    display_name: str
    pattern: str

    def as_webview_file_type(self) -> str:
        return f"{self.display_name} ({self.pattern})"


class SaveDialogOptions(BaseModel):
    title: str = "Save export file"
    default_filename: str = ""
    can_create_directories: bool = True
    filters: List[FileFilter] = []


class ExportResult(BaseModel):
    saved: bool
    path: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[str] = None


class DesktopSettings(BaseModel):
    title: str = "OrgChart"
    url: str = "frontend/dist/index.html"
    width: int = Field(1400, gt=0)
    height: int = Field(900, gt=0)
    min_size: Tuple[int, int] = (1024, 768)
    debug: bool = False
    gui: Optional[str] = None
