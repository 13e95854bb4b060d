"""Leaf content shared by cards, list items and the template envelope."""

from __future__ import annotations

from typing import Literal

from kakao_skill.l1_entities.base import SkillModel


class Link(SkillModel):
    web: str


class Title(SkillModel):
    """Single-title header (list card ``header``, item card ``head``)."""

    title: str


class Thumbnail(SkillModel):
    image_url: str
    link: Link | None = None
    fixed_ratio: bool = False
    width: int | None = None
    height: int | None = None

    def with_image_url(self, url: str) -> Thumbnail:
        return self.model_copy(update={'image_url': url})

    def with_link(self, url: str) -> Thumbnail:
        return self.model_copy(update={'link': Link(web=url)})

    def with_fixed_ratio(self, fixed: bool) -> Thumbnail:
        return self.model_copy(update={'fixed_ratio': fixed})

    def with_size(self, width: int | None = None, height: int | None = None) -> Thumbnail:
        """Set width and/or height; an omitted dimension keeps its current value."""
        update = {}
        if width is not None:
            update['width'] = width
        if height is not None:
            update['height'] = height
        return self.model_copy(update=update)


class ListItem(SkillModel):
    """One row of a list card."""

    title: str
    description: str | None = None
    image_url: str | None = None
    link: Link | None = None

    def with_description(self, description: str) -> ListItem:
        return self.model_copy(update={'description': description})

    def with_image(self, url: str) -> ListItem:
        return self.model_copy(update={'image_url': url})

    def with_link(self, url: str) -> ListItem:
        return self.model_copy(update={'link': Link(web=url)})


class QuickReply(SkillModel):
    """Suggested follow-up utterance shown under the response."""

    action: Literal['message'] = 'message'
    label: str
    message_text: str
    block_id: str | None = None

    def with_block_id(self, block_id: str) -> QuickReply:
        return self.model_copy(update={'block_id': block_id})
