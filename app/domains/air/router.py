# MISE-DASHBOARD/app/domains/air/router.py

from fastapi import APIRouter, Depends, HTTPException

from app.core.dependencies import get_air_service
from app.domains.air.service import AirQualityService

router = APIRouter()

@router.get("/realtime/{sido_name}")
async def get_sido_realtime(sido_name: str, service: AirQualityService = Depends(get_air_service)):
    """시도별 실시간 측정정보 (10분 캐시)"""
    return await service.get_realtime(sido_name)

@router.get("/realtime-bulk")
async def get_realtime_bulk(sido: str = "", service: AirQualityService = Depends(get_air_service)):
    """
    여러 시도 한번에 조회 (?sido=서울,부산,...)
    - 실패한 시도는 빈 리스트로 채워서 반환합니다.
    """
    sido_names = [name for name in sido.split(",") if name]
    if not sido_names:
        raise HTTPException(status_code=400, detail="sido 파라미터 필요")
    return await service.get_realtime_bulk(sido_names)

@router.get("/station-list/{sido_name}")
async def get_station_list(sido_name: str, service: AirQualityService = Depends(get_air_service)):
    return await service.get_station_list(sido_name)
