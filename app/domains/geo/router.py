# MISE-DASHBOARD/app/domains/geo/router.py

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.core.dependencies import get_geo_service
from app.domains.geo.service import GeoDataService

router = APIRouter()

@router.get("/geodata")
async def get_geodata(service: GeoDataService = Depends(get_geo_service)):
    """한국 행정구역 지도 데이터 (TopoJSON 원문 그대로)"""
    text = await service.get_topology()
    return Response(content=text, media_type="application/json")
