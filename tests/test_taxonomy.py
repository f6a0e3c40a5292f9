import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.keywords import (  # noqa: E402
    KeywordReport,
    analyze_keywords,
    is_technical_keyword,
    score_technical_keywords,
)
from resume_ats.taxonomy import ExtractedSkills, extract_skills, get_default_taxonomy_provider  # noqa: E402
from resume_ats.semantic import compute_match_ats  # noqa: E402
from resume_ats.taxonomy.local_taxonomy import LocalTaxonomy  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def test_default_taxonomy_has_seven_categories(self):
        categories = get_default_taxonomy_provider().categories()
        self.assertEqual(
            set(categories),
            {"languages", "web_frameworks", "databases", "cloud", "devops", "data", "tools"},
        )
        self.assertGreaterEqual(sum(len(names) for names in categories.values()), 85)

    def test_whole_word_matching(self):
        self.assertEqual(extract_skills("Senior javascript developer").flat, ["javascript"])
        self.assertEqual(extract_skills("typescriptjavascript").flat, [])
        self.assertNotIn("c", extract_skills("TypeScript and Python").flat)

    def test_symbol_skills_are_escaped_and_matched(self):
        skills = extract_skills("Shipped C++ and C# tooling with CI/CD and Spring Boot")
        self.assertIn("c++", skills.flat)
        self.assertIn("c#", skills.flat)
        self.assertIn("ci/cd", skills.flat)
        self.assertIn("spring boot", skills.flat)

    def test_skills_are_grouped_by_category(self):
        skills = extract_skills("React, PostgreSQL, Docker, AWS")
        self.assertEqual(skills.flat, ["react", "postgresql", "aws", "docker"])
        self.assertEqual(skills.categories["databases"], ["postgresql"])
        self.assertEqual(len(skills.categories), 4)

    def test_aliases_collapse_to_one_skill(self):
        self.assertEqual(extract_skills("Built services in Node.js").flat, ["node"])
        self.assertEqual(extract_skills("NodeJS and Node APIs").flat, ["node"])
        skills = extract_skills("Node.js, nodejs, node")
        self.assertEqual(skills.categories, {"web_frameworks": ["node"]})

    def test_alias_spelling_does_not_lower_hard_skill_coverage(self):
        result = compute_match_ats(
            "React Node PostgreSQL Docker AWS",
            "React, Node.js, PostgreSQL, Docker, AWS",
        )
        self.assertEqual(result.match.hard_skill_coverage_percent, 100)
        self.assertEqual(result.match.missing_hard_skills, [])

    def test_custom_taxonomy_aliases(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "skills.json"
            path.write_text(
                json.dumps(
                    {
                        "aliases": {"K8s": "kubernetes"},
                        "categories": {"ops": ["kubernetes", "k8s"]},
                    }
                )
            )
            taxonomy = LocalTaxonomy(path)
            self.assertEqual(taxonomy.extract_skills("Ran k8s clusters").flat, ["kubernetes"])
            self.assertEqual(taxonomy.canonical_name("k8s"), "kubernetes")

    def test_custom_taxonomy_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "skills.json"
            path.write_text(json.dumps({"version": "t1", "categories": {"ops": ["Helm", "helm"]}}))
            taxonomy = LocalTaxonomy(path)
            self.assertEqual(taxonomy.version, "t1")
            self.assertEqual(taxonomy.categories(), {"ops": ("helm",)})
            self.assertEqual(taxonomy.extract_skills("Deployed with HELM").flat, ["helm"])

    def test_invalid_taxonomy_file_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "skills.json"
            path.write_text("{not json")
            with self.assertRaises(RuntimeError):
                LocalTaxonomy(path)


class KeywordExtractorTests(unittest.TestCase):
    def test_empty_text_clamps_to_floors(self):
        report = analyze_keywords("")
        self.assertEqual(report.unique_token_count, 0)
        self.assertEqual(report.richness_score, 30)
        self.assertEqual(report.technical_score, 20)
        self.assertEqual(report.technical_keywords, [])

    def test_technical_heuristic(self):
        self.assertTrue(is_technical_keyword("node.js"))
        self.assertTrue(is_technical_keyword("c++"))
        self.assertTrue(is_technical_keyword("python3"))
        self.assertTrue(is_technical_keyword("communication"))
        self.assertFalse(is_technical_keyword("python"))

    def test_technical_keywords_are_capped(self):
        text = " ".join(f"tool{index}" for index in range(120))
        report = analyze_keywords(text)
        self.assertEqual(len(report.technical_keywords), 80)
        self.assertEqual(report.technical_score, 100)

    def test_skill_boosts(self):
        base = KeywordReport(unique_token_count=0, richness_score=30, technical_keywords=[], technical_score=20)
        eight = ExtractedSkills(
            flat=[f"s{index}" for index in range(8)],
            categories={"a": ["s0"], "b": ["s1"], "c": ["s2"]},
        )
        fifteen = ExtractedSkills(flat=[f"s{index}" for index in range(15)], categories={"a": ["s0"]})
        self.assertEqual(score_technical_keywords(base, ExtractedSkills()), 20)
        self.assertEqual(score_technical_keywords(base, eight), 35)
        self.assertEqual(score_technical_keywords(base, fifteen), 40)


if __name__ == "__main__":
    unittest.main()
