"""
Comic Categories

Static publisher categories listed by the site. Each member carries its
display name and the canonical listing url.
"""

from enum import Enum
from typing import Optional

BASE_CATEGORY_URL = "https://readcomicsonline.ru/comic-list/category"


class ComicCategory(Enum):
    MARVEL = ("Marvel", f"{BASE_CATEGORY_URL}/marvel-comics")
    DC = ("Dc comics", f"{BASE_CATEGORY_URL}/dc-comics")
    BOOM_STUDIOS = ("Boom Studios", f"{BASE_CATEGORY_URL}/boom-studios")
    DARK_HORSE = ("Dark Horse", f"{BASE_CATEGORY_URL}/dark-horse")
    DYNAMITE = ("Dynamite", f"{BASE_CATEGORY_URL}/dynamite")
    IDW = ("IDW", f"{BASE_CATEGORY_URL}/idw")
    ONI_PRESS = ("Oni Press", f"{BASE_CATEGORY_URL}/oni-press")
    ONE_SHOTS = ("One Shots", f"{BASE_CATEGORY_URL}/one-shot")
    VERTIGO = ("Vertigo", f"{BASE_CATEGORY_URL}/vertigo")
    AFTERSHOCK_COMICS = ("Aftershock comics", f"{BASE_CATEGORY_URL}/aftershock-comics")
    IMAGE_COMICS = ("Image Comics", f"{BASE_CATEGORY_URL}/image-comics")
    ZENESCOPE = ("Zenescope", f"{BASE_CATEGORY_URL}/zenescope")
    AVATAR_PRESS = ("Avatar press", f"{BASE_CATEGORY_URL}/avatar-press")
    ACTION_LAB = ("Action lab", f"{BASE_CATEGORY_URL}/action-lab")
    BLACK_MASK = ("Black mask", f"{BASE_CATEGORY_URL}/black-mask")
    AMERICAN_MYTHOLOGY = ("American Mythology", f"{BASE_CATEGORY_URL}/american-mythology")
    VALIANT = ("Valiant", f"{BASE_CATEGORY_URL}/valiant")
    ANTARTIC_PRESS = ("Antartic Press", f"{BASE_CATEGORY_URL}/antartic-press")
    MAD_CAVE = ("Mad Cave", f"{BASE_CATEGORY_URL}/mad-cave")
    EUROPE_COMICS = ("Europe Comics", f"{BASE_CATEGORY_URL}/europe-comics")
    AHOY_COMICS = ("Ahoy comics", f"{BASE_CATEGORY_URL}/ahoy")
    MAGNETIC_PRESS = ("Magnetic Press", f"{BASE_CATEGORY_URL}/magneticpress")
    STRANGER_COMICS = ("Stranger Comics", f"{BASE_CATEGORY_URL}/strangercomics")
    UPSHOT = ("Upshot", f"{BASE_CATEGORY_URL}/upshot")

    @property
    def display_name(self) -> str:
        return self.value[0]

    @property
    def url(self) -> str:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> Optional["ComicCategory"]:
        """
        Look up a category by member name or display name.

        Matching is case-insensitive and treats '-' and ' ' like '_',
        so 'dark-horse', 'Dark Horse' and 'DARK_HORSE' all resolve.
        """
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        for category in cls:
            if category.name == key:
                return category
            if category.display_name.upper().replace(" ", "_") == key:
                return category
        return None
