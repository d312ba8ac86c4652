"""호스트 데이터베이스 ID 상수"""


class BaseClasses:
    """아이템 분류 노드 ID (_parent 체인에 나타남)"""

    WEAPON = "5422acb9af1c889c16000029"
    ASSAULT_CARBINE = "5447b5fc4bdc2d87278b4567"
    ASSAULT_RIFLE = "5447b5f14bdc2d61278b4567"
    MACHINE_GUN = "5447bed64bdc2d97278b4568"
    MARKSMAN_RIFLE = "5447b6194bdc2d67278b4567"
    SHOTGUN = "5447b6094bdc2dc3278b4567"
    SMG = "5447b5e04bdc2d62278b4567"


class ItemTpl:
    """아이템 템플릿 ID"""

    BARTER_LEGA_MEDAL = "6656560053eaaa7a23349c86"
    MONEY_GP_COIN = "5d235b4d86f7742e017bc88a"


class Traders:
    REF = "6617beeaa9cfa777ca915b7c"


class RewardOutcome:
    """Quest.rewards 키"""

    SUCCESS = "Success"
    STARTED = "Started"
    FAIL = "Fail"


class RewardType:
    ITEM = "Item"
    EXPERIENCE = "Experience"
    TRADER_STANDING = "TraderStanding"


class RefQuests:
    """Ref 퀘스트 ID"""

    EASY_MONEY_P2 = "6834158f2f0e2a7eb90b62c8"
    PROVIDE_VIEWERSHIP = "675c15fbf7da9792a4059871"
    BALANCING_P1 = "68341846186efa3c5b07f989"
    BALANCING_P2 = "68341a0b2f0e2a7eb90b62d4"
    SURPRISE = "68341b407559f4e6d50bc0ce"
    CREATE_A_DISTRACTION_P1 = "68341c4babec72d95d0c1260"
    CREATE_A_DISTRACTION_P2 = "68341d7d7559f4e6d50bc0db"
    TO_GREAT_HEIGHTS_P1 = "68341eb25619c8e2a9031501"
    TO_GREAT_HEIGHTS_P2 = "68341f6fe2e7ef70a3060a0a"
    TO_GREAT_HEIGHTS_P3 = "6834202a186efa3c5b07f9a2"
    TO_GREAT_HEIGHTS_P4 = "683421515619c8e2a9031511"
    TO_GREAT_HEIGHTS_P5 = "68342265a8d674b5740b31f0"
    AGAINST_THE_CONSCIENCE_P1 = "6834233fecd5cf3a440d855b"
    AGAINST_THE_CONSCIENCE_P2 = "68342446a8d674b5740b31fc"
    DECISIONS = "6834254f2f0e2a7eb90b62ef"

    # 보너스 보상 / GP 코인 배율 대상
    ALL = (
        EASY_MONEY_P2,
        PROVIDE_VIEWERSHIP,
        BALANCING_P1,
        BALANCING_P2,
        SURPRISE,
        CREATE_A_DISTRACTION_P1,
        CREATE_A_DISTRACTION_P2,
        TO_GREAT_HEIGHTS_P1,
        TO_GREAT_HEIGHTS_P2,
        TO_GREAT_HEIGHTS_P3,
        TO_GREAT_HEIGHTS_P4,
        TO_GREAT_HEIGHTS_P5,
        AGAINST_THE_CONSCIENCE_P1,
        AGAINST_THE_CONSCIENCE_P2,
        DECISIONS,
    )

    # Arena 전용 조건을 일반 레이드 조건으로 교체할 퀘스트
    TO_EDIT = (
        TO_GREAT_HEIGHTS_P1,
        TO_GREAT_HEIGHTS_P2,
        TO_GREAT_HEIGHTS_P3,
        TO_GREAT_HEIGHTS_P4,
        TO_GREAT_HEIGHTS_P5,
        AGAINST_THE_CONSCIENCE_P2,
    )
