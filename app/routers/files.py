"""File router: workspace listing and file reads."""
from fastapi import APIRouter, Depends
from typing import Optional

from app.schemas.task import ApiResponse, ReadFileRequest
from app.services.file_service import FileService, get_file_service

router = APIRouter(tags=["Files"])


@router.get("/files", response_model=ApiResponse)
async def list_files(files: FileService = Depends(get_file_service)):
    """List files and directories in the workspace root."""
    entries = files.list_files()
    return ApiResponse(
        success=True,
        data=entries,
        message=f"Listed {len(entries)} files and directories",
    )


@router.post("/files/read", response_model=ApiResponse)
async def read_file(
    request: Optional[ReadFileRequest] = None,
    files: FileService = Depends(get_file_service),
):
    """Read a text file relative to the workspace root."""
    result = files.read_file(request.path if request else None)
    return ApiResponse(success=True, data=result, message="File read successfully")
