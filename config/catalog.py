"""초기 태스크/아이템 카탈로그"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class TaskCodeConfig:
    """코드에서 직접 참조하는 태스크 식별자"""

    DAILY_BONUS: str = "daily_bonus"
    """매일 1회 받을 수 있는 보너스"""

    CHANNEL_SUBSCRIPTION: str = "channel_subscription"
    """공식 채널 구독 보상"""


TASK_CODES = TaskCodeConfig()


@dataclass(frozen=True)
class TaskSeed:
    code: str
    title: str
    description: str
    reward: Decimal
    recurrence: str = "once"


@dataclass(frozen=True)
class ItemSeed:
    name: str
    description: str
    price: Decimal
    income_per_hour: Decimal
    image_url: str
    type: str = "artifact"


SEED_TASKS: Tuple[TaskSeed, ...] = (
    TaskSeed("invite_friend", "친구 초대", "친구를 앱에 초대하고 보상을 받으세요", Decimal("100")),
    TaskSeed("complete_10_tasks", "태스크 10개 완료", "아무 태스크나 10개를 완료하세요", Decimal("200")),
    TaskSeed("reach_level_5", "5레벨 달성", "앱에서 5레벨에 도달하세요", Decimal("300")),
    TaskSeed("earn_1000", "1000 VL 벌기", "어떤 방법으로든 1000 VL을 모으세요", Decimal("500")),
    TaskSeed(
        TASK_CODES.CHANNEL_SUBSCRIPTION,
        "채널 구독",
        "VLTOKEN 공식 채널을 구독하세요",
        Decimal("50"),
    ),
    TaskSeed(
        TASK_CODES.DAILY_BONUS,
        "일일 보너스",
        "매일 보너스를 받으세요",
        Decimal("10"),
        recurrence="daily",
    ),
)

SEED_ITEMS: Tuple[ItemSeed, ...] = (
    ItemSeed("크립토 채굴기", "0.5 VL/시간 생산", Decimal("100"), Decimal("0.5"), "/assets/items/crypto-miner.svg"),
    ItemSeed("VL 농장", "2.5 VL/시간 생산", Decimal("500"), Decimal("2.5"), "/assets/items/vl-farm.svg"),
    ItemSeed("비즈니스", "10 VL/시간 생산", Decimal("2000"), Decimal("10"), "/assets/items/business.svg"),
    ItemSeed("크립토 공장", "50 VL/시간 생산", Decimal("10000"), Decimal("50"), "/assets/items/crypto-factory.svg"),
    ItemSeed("Arcanum Sigil", "고대의 지혜의 문양", Decimal("200"), Decimal("1"), "/assets/items/arcanum-sigil.svg"),
    ItemSeed(
        "Shadow Essence",
        "그림자의 정수",
        Decimal("300"),
        Decimal("1.5"),
        "/assets/items/shadow-essence.svg",
        type="consumable",
    ),
    ItemSeed("Luminous Crystal", "빛나는 수정", Decimal("500"), Decimal("2.5"), "/assets/items/luminous-crystal.svg"),
    ItemSeed("Time Fragment", "시간의 파편", Decimal("1000"), Decimal("5"), "/assets/items/time-fragment.svg"),
    ItemSeed(
        "Spirit Vessel",
        "영혼의 그릇",
        Decimal("2000"),
        Decimal("10"),
        "/assets/items/spirit-vessel.svg",
        type="consumable",
    ),
    ItemSeed("Verdant Seed", "푸른 씨앗", Decimal("5000"), Decimal("25"), "/assets/items/verdant-seed.svg"),
    ItemSeed("Aether Prism", "에테르 프리즘", Decimal("10000"), Decimal("50"), "/assets/items/aether-prism.svg"),
    ItemSeed(
        "Mysterium Codex",
        "신비의 고문서",
        Decimal("20000"),
        Decimal("100"),
        "/assets/items/mysterium-codex.svg",
        type="legendary",
    ),
)
