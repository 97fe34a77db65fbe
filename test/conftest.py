from __future__ import annotations

import os

import pytest

# Point the application at an in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

CHAIR_CSV = """\
1,ゲーミングチェアA,座り心地抜群,/images/chair/1.png,2500,70,60,90,黒,"肘掛け,キャスター",ゲーミングチェア,10,5
2,座椅子B,和室向け,/images/chair/2.png,4500,100,90,120,白,肘掛け,座椅子,30,1
3,エルゴノミクスC,在庫切れ,/images/chair/3.png,2500,120,50,50,黒,,エルゴノミクス,20,0
4,ゲーミングチェアD,大型,/images/chair/4.png,16000,160,160,160,赤,"肘掛け,キャスター,フットレスト",ゲーミングチェア,20,3
"""

ESTATE_CSV = """\
1,物件A,駅近,/images/estate/1.png,東京都千代田区,35.5,139.5,40000,100,70,"駐車場あり,角部屋",50
2,物件B,広々,/images/estate/2.png,東京都港区,35.7,139.7,120000,160,160,角部屋,80
3,物件C,閑静,/images/estate/3.png,大阪府大阪市,34.6,135.5,60000,60,60,,90
4,物件D,新築,/images/estate/4.png,東京都新宿区,35.6,139.6,40000,90,120,駐車場あり,50
"""


@pytest.fixture
def chair_csv() -> str:
    """Four chairs; chair 3 is sold out."""
    return CHAIR_CSV


@pytest.fixture
def estate_csv() -> str:
    """Four estates; estate 3 lies far from the others."""
    return ESTATE_CSV
