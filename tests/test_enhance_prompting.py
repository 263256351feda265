import re
import unittest

from path_setup import ensure_src_path

ensure_src_path()

from prompts import (
    DEFAULT_CATEGORIES,
    RATIONALE_TEMPLATE,
    GenerationRequestConfig,
    StyleExtension,
    build_prompt,
    render_enhance_prompt,
)

_ENUMERATED = re.compile(r"^(\d+)\.\s+\*\*(.+?):\*\*\s?(.*)$", re.MULTILINE)


def _enumerated(prompt: str) -> list[tuple[int, str, str]]:
    return [(int(idx), name, body) for idx, name, body in _ENUMERATED.findall(prompt)]


class EnhancePromptTests(unittest.TestCase):
    def test_builtin_categories_are_numbered_one_to_seven(self) -> None:
        prompt = build_prompt("The report was written by me.")
        entries = _enumerated(prompt)

        self.assertEqual([idx for idx, _, _ in entries], list(range(1, 8)))
        self.assertEqual(
            [name for _, name, _ in entries],
            [
                "Proofread",
                "Rephrase for Clarity",
                "Shorten",
                "Simplify",
                "Modernize",
                "Friendly",
                "Emojify",
            ],
        )
        self.assertEqual(len(DEFAULT_CATEGORIES), 7)

    def test_user_text_is_quoted_at_the_end(self) -> None:
        text = 'He said "maybe" and left.\nSecond line.'
        prompt = build_prompt(text)
        self.assertTrue(prompt.endswith(f'USER TEXT: "{text}"'))

    def test_empty_user_text_still_produces_prompt(self) -> None:
        prompt = build_prompt("")
        self.assertTrue(prompt.endswith('USER TEXT: ""'))
        self.assertIn("[Transformation Categories]", prompt)

    def test_styles_continue_numbering_in_supplied_order(self) -> None:
        styles = [
            StyleExtension(name="Pirate", prompt="Talk like a pirate, arr."),
            StyleExtension(name="Legal", prompt="Rewrite as a formal contract clause."),
            StyleExtension(name="Haiku", prompt="Compress into a 5-7-5 haiku."),
        ]
        prompt = build_prompt("Ship the release today.", styles)
        entries = _enumerated(prompt)

        self.assertEqual([idx for idx, _, _ in entries], list(range(1, 11)))
        self.assertEqual(
            [(idx, name, body) for idx, name, body in entries[7:]],
            [
                (8, "Pirate", "Talk like a pirate, arr."),
                (9, "Legal", "Rewrite as a formal contract clause."),
                (10, "Haiku", "Compress into a 5-7-5 haiku."),
            ],
        )

    def test_unfiltered_mode_adds_one_category_after_styles(self) -> None:
        styles = [StyleExtension(name="Pirate", prompt="Talk like a pirate.")]
        filtered = build_prompt("Damn, that was close.", styles, unfiltered_mode=False)
        unfiltered = build_prompt("Damn, that was close.", styles, unfiltered_mode=True)

        filtered_entries = _enumerated(filtered)
        unfiltered_entries = _enumerated(unfiltered)
        self.assertEqual(len(unfiltered_entries), len(filtered_entries) + 1)
        last_idx, last_name, _ = unfiltered_entries[-1]
        self.assertEqual(last_idx, 8 + len(styles))
        self.assertEqual(last_name, "Unfiltered")
        self.assertIn("[Unfiltered Mode]", unfiltered)
        self.assertIn("explicit language", unfiltered)
        self.assertNotIn("[Unfiltered Mode]", filtered)

    def test_unfiltered_without_styles_uses_index_eight(self) -> None:
        entries = _enumerated(build_prompt("text", [], unfiltered_mode=True))
        self.assertEqual(entries[-1][0], 8)
        self.assertEqual(entries[-1][1], "Unfiltered")

    def test_blocks_appear_in_fixed_order(self) -> None:
        prompt = build_prompt(
            "Some text.",
            [StyleExtension(name="Pirate", prompt="Arr.")],
            unfiltered_mode=True,
        )
        markers = [
            "[Role]",
            "[Process]",
            "[Output Structure]",
            "[Transformation Categories]",
            "8.  **Pirate:** Arr.",
            "9.  **Unfiltered:**",
            "[Unfiltered Mode]",
            "[Constraints]",
            'USER TEXT: "Some text."',
        ]
        positions = [prompt.index(marker) for marker in markers]
        self.assertEqual(positions, sorted(positions))

    def test_output_structure_describes_critique_and_fenced_sections(self) -> None:
        prompt = build_prompt("x")
        self.assertIn("**Coach's Critique:**", prompt)
        self.assertIn("### [Category Name]\n```\n[Transformed Text]\n```", prompt)
        self.assertIn("Ensure every category has a code block.", prompt)
        self.assertIn("silently identify the single biggest weakness", prompt)

    def test_prompt_is_deterministic(self) -> None:
        config = GenerationRequestConfig(
            user_text="Same input.",
            styles=(StyleExtension(name="Formal", prompt="Use formal register."),),
            unfiltered_mode=True,
        )
        self.assertEqual(render_enhance_prompt(config), render_enhance_prompt(config))

    def test_build_prompt_accepts_missing_styles(self) -> None:
        self.assertEqual(build_prompt("abc", None), build_prompt("abc", []))

    def test_rationale_template_uses_its_own_marker_and_categories(self) -> None:
        prompt = build_prompt("x", template=RATIONALE_TEMPLATE)
        self.assertIn("**Rationale:**", prompt)
        self.assertNotIn("Modernize", prompt)
        self.assertEqual(len(_enumerated(prompt)), 6)


class StyleExtensionTests(unittest.TestCase):
    def test_blank_name_or_prompt_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            StyleExtension(name="  ", prompt="something")
        with self.assertRaises(ValueError):
            StyleExtension(name="Pirate", prompt="")

    def test_round_trips_through_dict(self) -> None:
        style = StyleExtension(name="Pirate", prompt="Arr.")
        self.assertEqual(StyleExtension.from_dict(style.to_dict()), style)


if __name__ == "__main__":
    unittest.main()
