"""Reference templates: the canonical example responses, by name."""

from __future__ import annotations

from collections.abc import Callable

from kakao_skill.l1_entities.basics import ListItem, QuickReply
from kakao_skill.l1_entities.buttons import LinkButton, ShareButton, TextButton
from kakao_skill.l1_entities.cards import BasicCard, CommerceCard, ItemCard
from kakao_skill.l1_entities.outputs import Carousel, ListCard, SimpleImage, SimpleText
from kakao_skill.l1_entities.template import Template

SAMPLE_THUMBNAIL = 'http://k.kakaocdn.net/dn/APR96/btqqH7zLanY/kD5mIPX7TdD2NAxgP29cC0/1x1.jpg'
SAMPLE_QUICK_REPLY = QuickReply(label='빠른 응답', message_text='빠른 응답 ㅋㅋ')


def build_list_card_example() -> Template:
    result = Template()
    result.add_quick_reply(QuickReply(label='오늘', message_text='오늘 공지 보여줘'))
    result.add_quick_reply(QuickReply(label='어제', message_text='어제 공지 보여줘'))

    list_card = (
        ListCard.titled('리스트 카드 제목!')
        .with_button(TextButton(label='그냥 텍스트 버튼'))
        .with_button(LinkButton(label='link label', web_link_url='https://google.com'))
        .with_button(ShareButton(label='share label').with_message('카톡에 보이는 메시지'))
        .with_item(ListItem(title='title').with_description('description').with_link('https://naver.com'))
    )
    result.add_output(list_card.build())
    return result


def build_simple_text_example() -> Template:
    result = Template()
    result.add_quick_reply(SAMPLE_QUICK_REPLY)
    result.add_output(SimpleText(text='심플 텍스트 테스트').build())
    return result


def build_simple_image_example() -> Template:
    result = Template()
    result.add_quick_reply(SAMPLE_QUICK_REPLY)
    result.add_output(SimpleImage(image_url='이미지 링크', alt_text='이미지 오류').build())
    return result


def build_basic_card_example() -> Template:
    result = Template()
    result.add_output(BasicCard.from_image(SAMPLE_THUMBNAIL).with_title('제목입니다.').build())
    return result


def build_item_card_example() -> Template:
    item_card = (
        ItemCard.blank()
        .with_title('title')
        .with_description('desc')
        .with_thumbnail('http://dev-mk.kakao.com/dn/bot/scripts/with_barcode_blue_1x1.png', width=800, height=800)
        .with_image_title('DOFQTK', description='Boarding Number')
        .with_alignment('right')
        .with_summary('total', '$4,032.54')
        .with_button(
            LinkButton(label='View Boarding Pass', web_link_url='https://namu.wiki/w/%EB%82%98%EC%97%B0(TWICE)')
        )
        .with_button_layout('vertical')
    )
    result = Template()
    result.add_output(item_card.build())
    return result


def _basic_card_carousel() -> Carousel:
    cards = (BasicCard.from_image(SAMPLE_THUMBNAIL).with_title(f'{i}번') for i in range(5))
    return Carousel(type=BasicCard.kind).with_cards(cards)


def build_basic_carousel_example() -> Template:
    result = Template()
    result.add_quick_reply(SAMPLE_QUICK_REPLY)
    result.add_output(_basic_card_carousel().build())
    return result


def build_commerce_carousel_example() -> Template:
    cards = (
        CommerceCard(description=f'{i} DESC', price=5000 + i, currency='WON').with_thumbnail(SAMPLE_THUMBNAIL)
        for i in range(5)
    )
    result = Template()
    result.add_quick_reply(SAMPLE_QUICK_REPLY)
    result.add_output(Carousel(type=CommerceCard.kind).with_cards(cards).build())
    return result


def build_multiple_outputs_example() -> Template:
    """Carousel of basic cards followed by a simple text."""
    result = Template()
    result.add_quick_reply(SAMPLE_QUICK_REPLY)
    result.add_output(_basic_card_carousel().build())
    result.add_output(SimpleText(text='심플 텍스트 테스트').build())
    return result


REFERENCE_TEMPLATES: dict[str, Callable[[], Template]] = {
    'listcard': build_list_card_example,
    'simpletext': build_simple_text_example,
    'simpleimage': build_simple_image_example,
    'basiccard': build_basic_card_example,
    'itemcard': build_item_card_example,
    'carousel-basic': build_basic_carousel_example,
    'carousel-commerce': build_commerce_carousel_example,
    'multiple': build_multiple_outputs_example,
}


def build_reference(name: str) -> Template:
    """Build a reference template by name. Raises KeyError listing valid names."""
    try:
        builder = REFERENCE_TEMPLATES[name]
    except KeyError:
        raise KeyError(f"Unknown example '{name}'. Available: {', '.join(REFERENCE_TEMPLATES)}") from None
    return builder()
