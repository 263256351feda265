import json
import unittest

from path_setup import ensure_src_path

ensure_src_path()

from parsing import ParsedResult, TransformationCard
from prompts import RATIONALE_TEMPLATE
from rendering import card_dom_id, render, render_html, render_text


def _result() -> ParsedResult:
    return ParsedResult(
        critique="Avoid <script> & hedging.",
        transformations=(
            TransformationCard("Rephrase for Clarity", "Use <b>bold</b> moves."),
            TransformationCard("Emojify", "Ship it 🚀"),
        ),
    )


class RenderingTests(unittest.TestCase):
    def test_card_dom_id_strips_non_alphanumerics(self) -> None:
        self.assertEqual(card_dom_id("Rephrase for Clarity"), "content-RephraseforClarity")
        self.assertEqual(card_dom_id("<x>'\""), "content-x")

    def test_html_escapes_model_output(self) -> None:
        markup = render_html(_result())
        self.assertIn("Avoid &lt;script&gt; &amp; hedging.", markup)
        self.assertIn("Use &lt;b&gt;bold&lt;/b&gt; moves.", markup)
        self.assertNotIn("<script>", markup)
        self.assertIn('id="content-RephraseforClarity"', markup)

    def test_html_omits_critique_box_when_empty(self) -> None:
        markup = render_html(ParsedResult())
        self.assertNotIn("coach-box", markup)

    def test_text_lists_cards_in_order(self) -> None:
        text = render_text(_result())
        self.assertLess(text.index("[1] Rephrase for Clarity"), text.index("[2] Emojify"))
        self.assertIn("COACH'S CRITIQUE", text)

    def test_text_header_follows_template_marker(self) -> None:
        text = render_text(_result(), template=RATIONALE_TEMPLATE)
        self.assertIn("RATIONALE\n", text)
        self.assertNotIn("COACH", text)
        self.assertIn("RATIONALE", render(_result(), "text", RATIONALE_TEMPLATE))

    def test_text_reports_empty_result(self) -> None:
        self.assertIn("no transformations", render_text(ParsedResult()))

    def test_json_format(self) -> None:
        payload = json.loads(render(_result(), "json"))
        self.assertEqual(payload["transformations"][1], {"title": "Emojify", "content": "Ship it 🚀"})


if __name__ == "__main__":
    unittest.main()
