"""
Reference template catalog.

Seeded UK varieties with their sowing/growth offsets. Read-only: a plant
copies a template's offsets when it is created and never looks back, so
editing an entry here does not touch existing plants.
"""
import logging
from typing import Iterable, Optional

from seedtrack.core.exceptions import TemplateNotFoundError
from seedtrack.schemas.plant import PlantCategory, PlantTemplate

logger = logging.getLogger(__name__)


def _template(
    id: str,
    name: str,
    category: PlantCategory,
    germination: int,
    transplant: int,
    harden_off: int,
    plant_out: int,
    harvest: int,
    sow_indoors_weeks: Optional[int] = None,
    direct_sow_weeks: Optional[int] = None,
    notes: Optional[str] = None,
) -> PlantTemplate:
    return PlantTemplate(
        id=id,
        name=name,
        category=category,
        days_to_germination=germination,
        days_to_transplant=transplant,
        days_to_harden_off=harden_off,
        days_to_plant_out=plant_out,
        days_to_harvest=harvest,
        sow_indoors_weeks_before=sow_indoors_weeks,
        direct_sow_weeks_after=direct_sow_weeks,
        notes=notes,
    )


VEG = PlantCategory.veg
HERB = PlantCategory.herb
FRUIT = PlantCategory.fruit


# ── Seed data ─────────────────────────────────────────────────────────────────
# offsets: germination, transplant, harden off, plant out (vs last frost), harvest

SEED_TEMPLATES: list[PlantTemplate] = [
    # ── Vegetables ────────────────────────────────────────────────────────────
    _template("tomato-moneymaker", "Tomato - Moneymaker", VEG, 7, 21, 7, 0, 80, 8,
              notes="Classic UK variety, reliable cropper. Cordon/indeterminate type."),
    _template("tomato-gardeners-delight", "Tomato - Gardener's Delight", VEG, 7, 21, 7, 0, 75, 8,
              notes="Sweet cherry tomato, heavy cropper. Cordon type."),
    _template("courgette-black-beauty", "Courgette - Black Beauty", VEG, 7, 14, 7, 14, 50, 4,
              notes="Dark green fruits, prolific producer. Pick when 10-15cm for best flavour."),
    _template("runner-beans-scarlet-emperor", "Runner Beans - Scarlet Emperor", VEG, 10, 14, 7, 14, 60, 4, 2,
              notes="Classic variety with red flowers. Needs support structure."),
    _template("runner-beans-painted-lady", "Runner Beans - Painted Lady", VEG, 10, 14, 7, 14, 65, 4, 2,
              notes="Bi-coloured red and white flowers. Heritage variety."),
    _template("chilli-jalapeno", "Chilli - Jalapeño", VEG, 14, 28, 10, 14, 75, 10,
              notes="Medium heat (2,500-8,000 SHU). Great for UK growing under cover."),
    _template("chilli-cayenne", "Chilli - Cayenne", VEG, 14, 28, 10, 14, 80, 10,
              notes="Hot variety (30,000-50,000 SHU). Good for drying."),
    _template("lettuce-little-gem", "Lettuce - Little Gem", VEG, 7, 14, 5, -14, 45, 6, 0,
              notes="Compact cos type, sweet and crunchy. Bolt resistant."),
    _template("lettuce-butterhead", "Lettuce - Butterhead", VEG, 7, 14, 5, -14, 50, 6, 0,
              notes="Soft, buttery leaves. Harvest whole head or pick outer leaves."),

    # ── Herbs ─────────────────────────────────────────────────────────────────
    _template("basil-genovese", "Basil - Genovese", HERB, 7, 21, 7, 14, 30, 6,
              notes="Classic Italian basil. Keep warm, pinch out flowers."),
    _template("basil-thai", "Basil - Thai", HERB, 7, 21, 7, 14, 30, 6,
              notes="Anise/liquorice flavour. Purple stems, pink flowers."),
    _template("coriander-slow-bolt", "Coriander - Slow Bolt", HERB, 10, 14, 5, 0, 21, 4, 0,
              notes="Slower to bolt than standard varieties. Sow successionally."),
    _template("parsley-flat-leaf", "Parsley - Flat Leaf", HERB, 21, 28, 7, -7, 30, 10,
              notes="Italian flat-leaf type. Stronger flavour than curly."),

    # ── Fruit ─────────────────────────────────────────────────────────────────
    _template("strawberry-cambridge-favourite", "Strawberry - Cambridge Favourite", FRUIT, 21, 42, 7, -7, 120, 12,
              notes="Classic UK variety. Usually grown from runners, not seed."),
]


class TemplateCatalog:
    """In-memory lookup over a fixed set of templates, in seed order."""

    def __init__(self, templates: Iterable[PlantTemplate]) -> None:
        self._templates: list[PlantTemplate] = []
        self._by_id: dict[str, PlantTemplate] = {}
        for template in templates:
            if template.id in self._by_id:
                raise ValueError(f"duplicate template id: {template.id}")
            self._templates.append(template)
            self._by_id[template.id] = template

    def __len__(self) -> int:
        return len(self._templates)

    def all(self) -> list[PlantTemplate]:
        return list(self._templates)

    def get(self, template_id: str) -> Optional[PlantTemplate]:
        return self._by_id.get(template_id)

    def require(self, template_id: str) -> PlantTemplate:
        template = self._by_id.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def by_category(self, category: PlantCategory | str) -> list[PlantTemplate]:
        category = PlantCategory(category)
        return [t for t in self._templates if t.category == category]

    def search(self, query: str) -> list[PlantTemplate]:
        """Case-insensitive substring match on name. Blank query matches everything."""
        needle = query.strip().lower()
        results = [t for t in self._templates if needle in t.name.lower()]
        logger.debug("template search %r: %d matches", query, len(results))
        return results


catalog = TemplateCatalog(SEED_TEMPLATES)
