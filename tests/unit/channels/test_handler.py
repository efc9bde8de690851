"""
Unit tests for src/channels/telegram/handler.py
"""

import asyncio
from types import SimpleNamespace

from src.channels.telegram.handler import TelegramHandler


class FakeBot:
    """Collects messages instead of sending them."""

    def __init__(self):
        self.sent: list[dict] = []

    async def send_message(self, chat_id, text, reply_markup=None, **kwargs) -> bool:
        self.sent.append({"chat_id": chat_id, "text": text, "reply_markup": reply_markup})
        return True

    async def send_chunks(self, chat_id, chunks, reply_markup=None) -> bool:
        for i, chunk in enumerate(chunks):
            markup = reply_markup if i == len(chunks) - 1 else None
            await self.send_message(chat_id, chunk, reply_markup=markup)
        return True


class FakeService:
    def __init__(self, response: str):
        self.response = response
        self.queries: list[str] = []

    async def handle_user_query(self, text: str) -> str:
        self.queries.append(text)
        return self.response


def make_update(text: str, chat_id: int = 42):
    user = SimpleNamespace(id=7, username="tester")
    return SimpleNamespace(
        message=SimpleNamespace(chat_id=chat_id, text=text, from_user=user)
    )


class TestTelegramHandler:
    """Tests for TelegramHandler routing."""

    def test_free_text_runs_search(self):
        bot = FakeBot()
        service = FakeService("**검색 결과**")
        handler = TelegramHandler(bot=bot, service=service, web_app_url="")

        assert asyncio.run(handler.handle_update(make_update("강남구 아파트"))) is True

        assert service.queries == ["강남구 아파트"]
        assert bot.sent == [{"chat_id": 42, "text": "<b>검색 결과</b>", "reply_markup": None}]

    def test_help_command(self):
        bot = FakeBot()
        service = FakeService("unused")
        handler = TelegramHandler(bot=bot, service=service, web_app_url="")

        asyncio.run(handler.handle_update(make_update("/help")))

        assert service.queries == []
        assert len(bot.sent) == 1
        assert bot.sent[0]["text"].startswith("<b>어디살래 검색 사용법</b>")

    def test_search_command_passes_args(self):
        bot = FakeBot()
        service = FakeService("결과")
        handler = TelegramHandler(bot=bot, service=service, web_app_url="")

        asyncio.run(handler.handle_update(make_update("/검색 마포구 전세")))

        assert service.queries == ["마포구 전세"]
        assert bot.sent[0]["text"] == "결과"

    def test_long_response_is_split(self):
        bot = FakeBot()
        long_text = "\n".join(f"{i}. 매물 정보" for i in range(1000))
        handler = TelegramHandler(bot=bot, service=FakeService(long_text), web_app_url="")

        asyncio.run(handler.handle_update(make_update("강남구")))

        assert len(bot.sent) > 1
        assert all(len(msg["text"]) <= 4096 for msg in bot.sent)

    def test_update_without_message(self):
        bot = FakeBot()
        handler = TelegramHandler(bot=bot, service=FakeService(""), web_app_url="")

        assert asyncio.run(handler.handle_update(SimpleNamespace(message=None))) is True
        assert bot.sent == []

    def test_web_app_button_on_start(self):
        bot = FakeBot()
        handler = TelegramHandler(
            bot=bot, service=FakeService(""), web_app_url="https://example.com/app"
        )

        asyncio.run(handler.handle_update(make_update("/start")))

        assert bot.sent[-1]["reply_markup"] is not None

    def test_no_button_on_search(self):
        bot = FakeBot()
        handler = TelegramHandler(
            bot=bot, service=FakeService("결과"), web_app_url="https://example.com/app"
        )

        asyncio.run(handler.handle_update(make_update("/search 강남구")))

        assert bot.sent[-1]["reply_markup"] is None
