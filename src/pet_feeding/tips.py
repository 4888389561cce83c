from __future__ import annotations

from .models import AgeCategory, Species

DEFAULT_LOCALE = "en"

NUTRITION_TIPS: dict[str, dict[tuple[Species, AgeCategory], tuple[str, ...]]] = {
    "en": {
        ("cat", "juvenile"): (
            "Choose a high-protein kitten food",
            "Make sure the food is easy to digest",
            "Transition gradually to solid food",
        ),
        ("cat", "adult"): (
            "Keep protein content above 32%",
            "Limit carbohydrate intake",
            "Make sure taurine intake is sufficient",
        ),
        ("cat", "senior"): (
            "Choose an easily digestible senior cat food",
            "Increase water intake",
            "Monitor kidney health regularly",
        ),
        ("dog", "juvenile"): (
            "Choose a puppy food suited to the expected adult size",
            "Keep the calcium to phosphorus ratio balanced",
            "Avoid overfeeding",
        ),
        ("dog", "adult"): (
            "Adjust portions to activity level",
            "Maintain an ideal body weight",
            "Check body condition regularly",
        ),
        ("dog", "senior"): (
            "Choose a low-sodium senior dog food",
            "Add joint-support ingredients",
            "Smaller, more frequent meals are easier to digest",
        ),
    },
    "zh": {
        ("cat", "juvenile"): ("选择高蛋白幼猫粮", "确保食物易消化", "逐渐过渡到固体食物"),
        ("cat", "adult"): ("保持蛋白质含量在32%以上", "控制碳水化合物摄入", "确保牛磺酸充足"),
        ("cat", "senior"): ("选择易消化的老年猫粮", "增加水分摄入", "定期监测肾脏健康"),
        ("dog", "juvenile"): ("选择适合体型的幼犬粮", "注意钙磷比例平衡", "避免过度喂食"),
        ("dog", "adult"): ("根据活动量调整食量", "保持理想体重", "定期检查体态"),
        ("dog", "senior"): ("选择低钠老年犬粮", "添加关节保健成分", "少量多餐更易消化"),
    },
}

LOCALES: tuple[str, ...] = tuple(NUTRITION_TIPS)


def nutrition_tips(species: Species, age_category: AgeCategory, locale: str = DEFAULT_LOCALE) -> tuple[str, ...]:
    table = NUTRITION_TIPS.get(locale)
    if table is None:
        raise ValueError(f"locale must be one of: {', '.join(LOCALES)}")
    return table[(species, age_category)]
