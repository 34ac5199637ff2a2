# memento/api/v1/images.py

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from memento.core.dependencies import get_image_cache
from memento.services import ImageCache

router = APIRouter()


@router.get("/{size}/{image_path:path}", summary="TMDB 이미지 (디스크 캐시)")
async def get_image(
    size: str = Path(pattern=r"^(w\d+|original)$", description="이미지 크기"),
    image_path: str = Path(description="TMDB 이미지 경로"),
    image_cache: ImageCache = Depends(get_image_cache),
):
    data = await image_cache.get_image(f"/{image_path.lstrip('/')}", size)
    if data is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return Response(content=data, media_type="image/jpeg")
