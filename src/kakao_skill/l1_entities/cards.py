"""Card content: basic, commerce and item cards.

A card is used either on its own (``build()`` promotes it to an output) or
as an item of a carousel. Cards are immutable; every ``with_*`` method
returns a new card.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, ClassVar, Literal, Union

from pydantic import Discriminator, Field, Tag, model_validator

from kakao_skill.l1_entities.base import SkillModel
from kakao_skill.l1_entities.basics import Link, Thumbnail, Title
from kakao_skill.l1_entities.buttons import Button
from kakao_skill.l1_entities.shapes import Shape, ShapeMatcher

if TYPE_CHECKING:
    from kakao_skill.l1_entities.outputs import BasicCardOutput, CommerceCardOutput, ItemCardOutput

CardKind = Literal['basicCard', 'commerceCard', 'itemCard']


class BasicCard(SkillModel):
    kind: ClassVar[str] = 'basicCard'
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({'buttons'})

    title: str | None = None
    description: str | None = None
    thumbnail: Thumbnail
    buttons: list[Button] = Field(default_factory=list)

    @classmethod
    def from_image(cls, image_url: str) -> BasicCard:
        return cls(thumbnail=Thumbnail(image_url=image_url))

    def with_title(self, title: str) -> BasicCard:
        return self.model_copy(update={'title': title})

    def with_description(self, description: str) -> BasicCard:
        return self.model_copy(update={'description': description})

    def with_thumbnail(self, image_url: str) -> BasicCard:
        return self.model_copy(update={'thumbnail': self.thumbnail.with_image_url(image_url)})

    def with_link(self, url: str) -> BasicCard:
        return self.model_copy(update={'thumbnail': self.thumbnail.with_link(url)})

    def with_fixed_ratio(self, fixed: bool) -> BasicCard:
        return self.model_copy(update={'thumbnail': self.thumbnail.with_fixed_ratio(fixed)})

    def with_size(self, width: int | None = None, height: int | None = None) -> BasicCard:
        return self.model_copy(update={'thumbnail': self.thumbnail.with_size(width, height)})

    def with_button(self, button: Button) -> BasicCard:
        return self.model_copy(update={'buttons': [*self.buttons, button]})

    def build(self) -> BasicCardOutput:
        from kakao_skill.l1_entities.outputs import BasicCardOutput  # noqa: PLC0415 -- outputs imports cards

        return BasicCardOutput(basic_card=self)


class CommerceCard(SkillModel):
    kind: ClassVar[str] = 'commerceCard'
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({'thumbnails', 'buttons'})

    description: str
    price: int
    currency: str
    discount: int | None = None
    discount_rate: int | None = None
    discounted_price: int | None = None
    thumbnails: list[Thumbnail] = Field(default_factory=list)
    buttons: list[Button] = Field(default_factory=list)

    @model_validator(mode='after')
    def _check_discount_pair(self) -> CommerceCard:
        if (self.discount_rate is None) != (self.discounted_price is None):
            raise ValueError('discountRate and discountedPrice must be given together')
        return self

    def with_description(self, description: str) -> CommerceCard:
        return self.model_copy(update={'description': description})

    def with_price(self, price: int, currency: str | None = None) -> CommerceCard:
        update: dict[str, Any] = {'price': price}
        if currency is not None:
            update['currency'] = currency
        return self.model_copy(update=update)

    def with_discount(self, discount: int) -> CommerceCard:
        return self.model_copy(update={'discount': discount})

    def with_discount_rate(self, rate: int, discounted_price: int) -> CommerceCard:
        """Rate and discounted price travel together on the wire."""
        return self.model_copy(update={'discount_rate': rate, 'discounted_price': discounted_price})

    def with_thumbnail(self, image_url: str, link: str | None = None) -> CommerceCard:
        thumbnail = Thumbnail(image_url=image_url, link=Link(web=link) if link else None)
        return self.model_copy(update={'thumbnails': [*self.thumbnails, thumbnail]})

    def with_button(self, button: Button) -> CommerceCard:
        return self.model_copy(update={'buttons': [*self.buttons, button]})

    def build(self) -> CommerceCardOutput:
        from kakao_skill.l1_entities.outputs import CommerceCardOutput  # noqa: PLC0415 -- outputs imports cards

        return CommerceCardOutput(commerce_card=self)


class ImageTitle(SkillModel):
    title: str
    description: str | None = None
    image_url: str | None = None


class ItemRow(SkillModel):
    """One ``itemList`` entry (also the shape of ``itemListSummary``)."""

    title: str
    description: str


class ItemCard(SkillModel):
    kind: ClassVar[str] = 'itemCard'
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({'buttons'})

    thumbnail: Thumbnail | None = None
    head: Title | None = None
    image_title: ImageTitle | None = None
    item_list: list[ItemRow]
    item_list_alignment: Literal['left', 'right'] | None = None
    item_list_summary: ItemRow | None = None
    title: str | None = None
    description: str | None = None
    buttons: list[Button] = Field(default_factory=list)
    button_layout: Literal['vertical', 'horizontal'] | None = None

    @classmethod
    def blank(cls) -> ItemCard:
        """An item card with no rows; ``itemList`` is required on the wire even when empty."""
        return cls(item_list=[])

    def with_thumbnail(self, image_url: str, width: int | None = None, height: int | None = None) -> ItemCard:
        thumbnail = Thumbnail(image_url=image_url, width=width, height=height)
        return self.model_copy(update={'thumbnail': thumbnail})

    def with_head(self, title: str) -> ItemCard:
        return self.model_copy(update={'head': Title(title=title)})

    def with_image_title(
        self,
        title: str,
        description: str | None = None,
        image_url: str | None = None,
    ) -> ItemCard:
        image_title = ImageTitle(title=title, description=description, image_url=image_url)
        return self.model_copy(update={'image_title': image_title})

    def with_item(self, title: str, description: str) -> ItemCard:
        row = ItemRow(title=title, description=description)
        return self.model_copy(update={'item_list': [*self.item_list, row]})

    def with_alignment(self, alignment: Literal['left', 'right']) -> ItemCard:
        return self.model_copy(update={'item_list_alignment': alignment})

    def with_summary(self, title: str, description: str) -> ItemCard:
        return self.model_copy(update={'item_list_summary': ItemRow(title=title, description=description)})

    def with_title(self, title: str) -> ItemCard:
        return self.model_copy(update={'title': title})

    def with_description(self, description: str) -> ItemCard:
        return self.model_copy(update={'description': description})

    def with_button(self, button: Button) -> ItemCard:
        return self.model_copy(update={'buttons': [*self.buttons, button]})

    def with_button_layout(self, layout: Literal['vertical', 'horizontal']) -> ItemCard:
        return self.model_copy(update={'button_layout': layout})

    def build(self) -> ItemCardOutput:
        from kakao_skill.l1_entities.outputs import ItemCardOutput  # noqa: PLC0415 -- outputs imports cards

        return ItemCardOutput(item_card=self)


CARD_TYPES = (BasicCard, CommerceCard, ItemCard)

# Priority order for sniffing raw carousel items.
CARD_SHAPES = ShapeMatcher([Shape.of(card_type.kind, card_type) for card_type in CARD_TYPES])


def _card_tag(value: Any) -> str | None:
    if isinstance(value, CARD_TYPES):
        return value.kind
    return CARD_SHAPES.match(value)


Card = Annotated[
    Union[
        Annotated[BasicCard, Tag('basicCard')],
        Annotated[CommerceCard, Tag('commerceCard')],
        Annotated[ItemCard, Tag('itemCard')],
    ],
    Discriminator(
        _card_tag,
        custom_error_type='card_shape',
        custom_error_message='card matches no known card shape',
    ),
]
