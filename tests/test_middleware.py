"""Tests for attachment transforms."""

from __future__ import annotations

from scrybot.middleware import ability_words, footer, make_footer, manamoji, reminder_text
from scrybot.middleware.manamoji import symbols_to_emoji


class TestFooter:
    def test_stamps_footer(self) -> None:
        out = make_footer("Scryfall", "https://icon")({"title": "T"})
        assert out["footer"] == "Scryfall"
        assert out["footer_icon"] == "https://icon"
        assert out["title"] == "T"

    def test_idempotent(self) -> None:
        once = footer({"title": "T"})
        assert footer(once) == once

    def test_does_not_mutate_input(self) -> None:
        original = {"title": "T"}
        footer(original)
        assert original == {"title": "T"}

    def test_no_icon(self) -> None:
        out = make_footer("Only text", None)({"title": "T"})
        assert "footer_icon" not in out


class TestManamoji:
    def test_symbols(self) -> None:
        assert symbols_to_emoji("{2}{R}{R}") == ":mana-2::mana-r::mana-r:"
        assert symbols_to_emoji("{T}: Add {G}.") == ":mana-t:: Add :mana-g:."
        assert symbols_to_emoji("{W/P}") == ":mana-wp:"
        assert symbols_to_emoji("{2/U}") == ":mana-2u:"

    def test_unknown_symbol_untouched(self) -> None:
        assert symbols_to_emoji("{FOO}") == "{FOO}"

    def test_title_and_text(self) -> None:
        out = manamoji({"title": "Lightning Bolt {R}", "text": "{T}: do it"})
        assert out["title"] == "Lightning Bolt :mana-r:"
        assert out["text"] == ":mana-t:: do it"

    def test_missing_fields(self) -> None:
        assert manamoji({"color": "#000"}) == {"color": "#000"}


class TestReminderText:
    def test_strips_inline(self) -> None:
        out = reminder_text({"text": "Flying (This creature can't be blocked except by creatures with flying or reach.)"})
        assert out["text"] == "Flying"

    def test_drops_reminder_only_lines(self) -> None:
        text = "Creature — Elf\n(Elves are cool.)\nTrample"
        assert reminder_text({"text": text})["text"] == "Creature — Elf\nTrample"

    def test_keeps_blank_lines(self) -> None:
        assert reminder_text({"text": "a\n\nb"})["text"] == "a\n\nb"

    def test_no_text(self) -> None:
        assert reminder_text({"title": "T"}) == {"title": "T"}


class TestAbilityWords:
    def test_links_line_start(self) -> None:
        out = ability_words({"text": "Creature\nLandfall — Whenever a land enters, draw."})
        assert out["text"] == (
            "Creature\n_<https://mtg.fandom.com/wiki/Landfall|Landfall>_ — Whenever a land enters, draw."
        )

    def test_multi_word(self) -> None:
        out = ability_words({"text": "Spell mastery — If there are two"})
        assert out["text"].startswith("_<https://mtg.fandom.com/wiki/Spell_mastery|Spell mastery>_ —")

    def test_ignores_mid_line(self) -> None:
        text = "This has Landfall — not really"
        assert ability_words({"text": text})["text"] == text

    def test_idempotent(self) -> None:
        once = ability_words({"text": "Raid — Draw a card."})
        assert ability_words(once) == once
