"""kakao-skill: typed builders and codec for KakaoTalk skill responses."""

__version__ = '0.3.0'
