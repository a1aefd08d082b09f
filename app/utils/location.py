# MISE-DASHBOARD/app/utils/location.py

import math
import sys
from typing import NamedTuple, Sequence


class GridCell(NamedTuple):
    nx: int
    ny: int


class RegionCenter(NamedTuple):
    name: str
    lat: float
    lng: float


# 시도별 대표 좌표 (순서 고정: 거리가 같으면 앞쪽 시도가 선택됨)
SIDO_CENTERS: tuple[RegionCenter, ...] = (
    RegionCenter("서울", 37.5665, 126.978),
    RegionCenter("부산", 35.1796, 129.0756),
    RegionCenter("대구", 35.8714, 128.6014),
    RegionCenter("인천", 37.4563, 126.7052),
    RegionCenter("광주", 35.1595, 126.8526),
    RegionCenter("대전", 36.3504, 127.3845),
    RegionCenter("울산", 35.5384, 129.3114),
    RegionCenter("세종", 36.48, 127.289),
    RegionCenter("경기", 37.275, 127.0094),
    RegionCenter("강원", 37.8228, 128.1555),
    RegionCenter("충북", 36.6357, 127.4913),
    RegionCenter("충남", 36.5184, 126.8),
    RegionCenter("전북", 35.7175, 127.153),
    RegionCenter("전남", 34.8679, 126.991),
    RegionCenter("경북", 36.4919, 128.8889),
    RegionCenter("경남", 35.4606, 128.2132),
    RegionCenter("제주", 33.4996, 126.5312),
)

# 시도 -> 생활기상지수 행정구역코드
SIDO_UV_AREA_CODES = {
    "서울": "1100000000", "부산": "2600000000", "대구": "2200000000", "인천": "2800000000",
    "광주": "2900000000", "대전": "3000000000", "울산": "3100000000", "세종": "3611000000",
    "경기": "4100000000", "강원": "4200000000", "충북": "4300000000", "충남": "4400000000",
    "전북": "4500000000", "전남": "4600000000", "경북": "4700000000", "경남": "4800000000",
    "제주": "5000000000",
}


def map_to_grid(lat: float, lon: float) -> GridCell:
    """
    위도/경도 -> 기상청 격자(NX, NY) 변환 (Lambert Conformal Conic)
    범위 검사는 하지 않습니다. 반올림은 floor(x + 0.5) 방식입니다.
    """
    RE = 6371.00877  # 지구 반경(km)
    GRID = 5.0       # 격자 간격(km)
    SLAT1 = 30.0     # 표준위도 1
    SLAT2 = 60.0     # 표준위도 2
    OLON = 126.0     # 기준점 경도
    OLAT = 38.0      # 기준점 위도
    XO = 43          # 기준점 X좌표
    YO = 136         # 기준점 Y좌표

    DEGRAD = math.pi / 180.0

    re = RE / GRID
    slat1 = SLAT1 * DEGRAD
    slat2 = SLAT2 * DEGRAD
    olon = OLON * DEGRAD
    olat = OLAT * DEGRAD

    sn = math.tan(math.pi * 0.25 + slat2 * 0.5) / math.tan(math.pi * 0.25 + slat1 * 0.5)
    sn = math.log(math.cos(slat1) / math.cos(slat2)) / math.log(sn)
    sf = math.tan(math.pi * 0.25 + slat1 * 0.5)
    sf = pow(sf, sn) * math.cos(slat1) / sn
    ro = math.tan(math.pi * 0.25 + olat * 0.5)
    ro = re * sf / pow(ro, sn)

    ra = math.tan(math.pi * 0.25 + lat * DEGRAD * 0.5)
    # 남위 90도 이하(또는 북위 90도 초과)에서는 tan 값이 0 이하가 되므로 최소 양수로 고정
    ra = max(ra, sys.float_info.min)
    ra = re * sf / pow(ra, sn)

    theta = lon * DEGRAD - olon
    if theta > math.pi:
        theta -= 2.0 * math.pi
    if theta < -math.pi:
        theta += 2.0 * math.pi
    theta *= sn

    nx = int(math.floor(ra * math.sin(theta) + XO + 0.5))
    ny = int(math.floor(ro - ra * math.cos(theta) + YO + 0.5))

    return GridCell(nx, ny)


def find_nearest_sido(lat: float, lng: float, centers: Sequence[RegionCenter] = SIDO_CENTERS) -> str:
    """
    위경도와 가장 가까운 시도명을 반환합니다. (위경도 평면상 유클리드 거리)
    """
    nearest = "서울"
    min_distance = float('inf')

    for center in centers:
        dist = (center.lat - lat) ** 2 + (center.lng - lng) ** 2
        if dist < min_distance:
            min_distance = dist
            nearest = center.name

    return nearest
