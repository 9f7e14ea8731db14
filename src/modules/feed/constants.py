"""Feed catalogue: the fixed list of feeds a cow can be given."""

from django.db import models


class FoodCategory(models.TextChoices):
    DRY = "Suku charu", "Suku charu"
    GREEN = "Lilu charu", "Lilu charu"
    GRAIN = "Dhaan", "Dhaan"


FOOD_ITEMS: dict[str, str] = {
    "TUVER BHUSU": FoodCategory.DRY.value,
    "GHAU BHUSU": FoodCategory.DRY.value,
    "CHANA BHUSU": FoodCategory.DRY.value,
    "HUNDIYU-JUVAR": FoodCategory.DRY.value,
    "HUNDIYU-BAJARI": FoodCategory.DRY.value,
    "SHERADI KUCHA": FoodCategory.DRY.value,
    "SAILEG": FoodCategory.GREEN.value,
    "NEPIER MAKAI": FoodCategory.GREEN.value,
    "NEPIER BAJARI - JUVAR": FoodCategory.GREEN.value,
    "NEPIER BAJARI - SHERADI": FoodCategory.GREEN.value,
    "BAJARI - MAKAI": FoodCategory.GREEN.value,
    "VEGETABLE WASTE": FoodCategory.GREEN.value,
    "KAPAS KHOD": FoodCategory.GRAIN.value,
    "MAKAI KHOD": FoodCategory.GRAIN.value,
    "READYMADE FEED": FoodCategory.GRAIN.value,
    "HOMEMADE MIX": FoodCategory.GRAIN.value,
}

MAX_QUANTITY_KG = 100
NOTES_MAX_LENGTH = 500
