"""Curated YouTube channels shown next to video search results."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class Channel:
    id: str
    name: str
    description: str
    image_url: str
    channel_url: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "imageUrl": self.image_url,
            "channelUrl": self.channel_url,
        }


RECOMMENDED_CHANNELS: List[Channel] = [
    Channel(
        id="UCxx_3w_GOb-lyt_q294kLuw",
        name="강형욱의 보듬TV",
        description="대한민국 대표 반려견 훈련사 강형욱의 공식 채널입니다. 강아지 행동 문제, 교육법 등 전문적인 정보를 제공합니다.",
        image_url="/images/bodeum-logo.jpg",
        channel_url="https://www.youtube.com/@BodeumOfficial",
    ),
    Channel(
        id="UCHs_n_c_i2j2-fext-fUDqQ",
        name="윤샘의 강아지상담소",
        description="20년 경력의 수의사가 직접 운영하는 채널. 질병, 예방 접종, 응급 처치 등 의학적인 궁금증을 해결해 줍니다.",
        image_url="/images/yoonsem_dog-logo.jpg",
        channel_url="https://www.youtube.com/@yoonsem_dog",
    ),
    Channel(
        id="UC-Ivg3Q3-6p8t2_g56n_SRw",
        name="설채현의 DOG설TV",
        description="수의사이자 행동 전문가인 설채현의 채널. 과학적 근거를 바탕으로 반려견의 행동과 심리를 알기 쉽게 설명합니다.",
        image_url="/images/knollo_with_dvmseol-logo.jpg",
        channel_url="https://www.youtube.com/@knollo_with_dvmseol",
    ),
]


__all__ = ["Channel", "RECOMMENDED_CHANNELS"]
