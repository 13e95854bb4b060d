"""Output variant codec.

Every output serializes as an object with exactly one wrapper key
(``simpleText``, ``listCard``, ``carousel`` ...). The wire carries no other
type tag, so decoding sniffs the shape: candidates are tried in
``OUTPUT_TYPES`` order and the first one whose required keys are present and
whose keys are all known wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any, ClassVar, Union

from pydantic import Discriminator, Field, Tag, model_validator

from kakao_skill.l1_entities.base import SkillModel
from kakao_skill.l1_entities.basics import ListItem, Thumbnail, Title
from kakao_skill.l1_entities.buttons import Button
from kakao_skill.l1_entities.cards import BasicCard, Card, CardKind, CommerceCard, ItemCard
from kakao_skill.l1_entities.errors import CarouselKindMismatchError
from kakao_skill.l1_entities.shapes import Shape, ShapeMatcher


class SimpleText(SkillModel):
    text: str

    def build(self) -> SimpleTextOutput:
        return SimpleTextOutput(simple_text=self)


class SimpleImage(SkillModel):
    image_url: str
    alt_text: str

    def build(self) -> SimpleImageOutput:
        return SimpleImageOutput(simple_image=self)


class ListCard(SkillModel):
    omit_when_empty: ClassVar[frozenset[str]] = frozenset({'buttons'})

    buttons: list[Button] = Field(default_factory=list)
    header: Title
    items: list[ListItem]

    @classmethod
    def titled(cls, title: str) -> ListCard:
        return cls(header=Title(title=title), items=[])

    def with_button(self, button: Button) -> ListCard:
        return self.model_copy(update={'buttons': [*self.buttons, button]})

    def with_item(self, item: ListItem) -> ListCard:
        return self.model_copy(update={'items': [*self.items, item]})

    def build(self) -> ListCardOutput:
        return ListCardOutput(list_card=self)


class CarouselHeader(SkillModel):
    title: str
    description: str
    thumbnail: Thumbnail


class Carousel(SkillModel):
    """Horizontally scrolling cards of a single declared kind."""

    omit_when_empty: ClassVar[frozenset[str]] = frozenset({'items'})

    type: CardKind
    items: list[Card] = Field(default_factory=list)
    header: CarouselHeader | None = None

    @model_validator(mode='after')
    def _check_item_kinds(self) -> Carousel:
        for index, card in enumerate(self.items):
            if card.kind != self.type:
                raise ValueError(f'carousel of type {self.type!r} cannot hold {card.kind!r} (item {index})')
        return self

    def with_card(self, card: Card) -> Carousel:
        if card.kind != self.type:
            raise CarouselKindMismatchError(f'carousel of type {self.type!r} cannot hold {card.kind!r}')
        return self.model_copy(update={'items': [*self.items, card]})

    def with_cards(self, cards: Iterable[Card]) -> Carousel:
        carousel = self
        for card in cards:
            carousel = carousel.with_card(card)
        return carousel

    def with_header(self, title: str, description: str, thumbnail_url: str) -> Carousel:
        header = CarouselHeader(title=title, description=description, thumbnail=Thumbnail(image_url=thumbnail_url))
        return self.model_copy(update={'header': header})

    def build(self) -> CarouselOutput:
        return CarouselOutput(carousel=self)


# --- Output wrappers ---


class _OutputBase(SkillModel):
    tag: ClassVar[str]

    @property
    def content(self) -> SkillModel:
        """The wrapped payload."""
        return getattr(self, next(iter(type(self).model_fields)))


class ListCardOutput(_OutputBase):
    tag: ClassVar[str] = 'listCard'
    list_card: ListCard


class BasicCardOutput(_OutputBase):
    tag: ClassVar[str] = 'basicCard'
    basic_card: BasicCard


class CommerceCardOutput(_OutputBase):
    tag: ClassVar[str] = 'commerceCard'
    commerce_card: CommerceCard


class ItemCardOutput(_OutputBase):
    tag: ClassVar[str] = 'itemCard'
    item_card: ItemCard


class SimpleTextOutput(_OutputBase):
    tag: ClassVar[str] = 'simpleText'
    simple_text: SimpleText


class SimpleImageOutput(_OutputBase):
    tag: ClassVar[str] = 'simpleImage'
    simple_image: SimpleImage


class CarouselOutput(_OutputBase):
    tag: ClassVar[str] = 'carousel'
    carousel: Carousel


# Decode priority. A new kind must be appended so that OUTPUT_SHAPES.ambiguities() stays empty.
OUTPUT_TYPES = (
    ListCardOutput,
    BasicCardOutput,
    CommerceCardOutput,
    ItemCardOutput,
    SimpleTextOutput,
    SimpleImageOutput,
    CarouselOutput,
)
OUTPUT_SHAPES = ShapeMatcher([Shape.of(output_type.tag, output_type) for output_type in OUTPUT_TYPES])

OUTPUT_CONTENT_TYPES = (ListCard, BasicCard, CommerceCard, ItemCard, SimpleText, SimpleImage, Carousel)


def _output_tag(value: Any) -> str | None:
    if isinstance(value, OUTPUT_TYPES):
        return value.tag
    return OUTPUT_SHAPES.match(value)


Output = Annotated[
    Union[
        Annotated[ListCardOutput, Tag('listCard')],
        Annotated[BasicCardOutput, Tag('basicCard')],
        Annotated[CommerceCardOutput, Tag('commerceCard')],
        Annotated[ItemCardOutput, Tag('itemCard')],
        Annotated[SimpleTextOutput, Tag('simpleText')],
        Annotated[SimpleImageOutput, Tag('simpleImage')],
        Annotated[CarouselOutput, Tag('carousel')],
    ],
    Discriminator(
        _output_tag,
        custom_error_type='output_shape',
        custom_error_message='output matches no known shape',
    ),
]
