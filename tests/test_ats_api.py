import os
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests independent of the per-client rate limit.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from fastapi.testclient import TestClient  # noqa: E402

from resume_ats.main import app  # noqa: E402


class ATSApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.resume_text = (
            "Jane Doe\n"
            "jane.doe@example.com linkedin.com/in/janedoe\n"
            "SUMMARY\n"
            "Backend engineer building payment services.\n"
            "EXPERIENCE\n"
            "- Built services with React, Node, PostgreSQL, Docker, AWS for checkout teams.\n"
            "- Reduced API latency across critical endpoints.\n"
            "EDUCATION\n"
            "BSc Computer Science\n"
            "SKILLS\n"
            "React, Node, PostgreSQL, Docker, AWS\n"
        )
        cls.jd_text = "Requirements: React, Node, PostgreSQL, Docker and AWS experience."

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertTrue(body["taxonomy_version"])

    def test_general_contract_shape(self):
        response = self.client.post(
            "/v1/ats/general",
            json={"resume_text": self.resume_text, "career_level": "Senior", "role": "swe"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["ok"])
        self.assertIsInstance(body["score"], int)
        self.assertGreaterEqual(body["score"], 0)
        self.assertLessEqual(body["score"], 100)
        self.assertEqual(body["meta"]["career_level"], "senior")
        self.assertEqual(body["meta"]["role"], "SWE")
        self.assertEqual(body["meta"]["contact"]["score"], 65)
        self.assertIn("balance", body["breakdown"])
        self.assertIsInstance(body["suggestions"], list)
        self.assertIn("global", body["enhancements"])

    def test_general_rejects_whitespace_resume(self):
        response = self.client.post("/v1/ats/general", json={"resume_text": "   \n  "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Could not read any text from the resume.")

    def test_general_validates_payload(self):
        response = self.client.post("/v1/ats/general", json={"resume_text": ""})
        self.assertEqual(response.status_code, 422)

    def test_match_contract_shape(self):
        response = self.client.post(
            "/v1/ats/match",
            json={"resume_text": self.resume_text, "jd_text": self.jd_text},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["ok"])
        self.assertEqual(body["match"]["hard_skill_coverage_percent"], 100)
        self.assertIn("score", body["general"])
        self.assertEqual(body["general"]["meta"]["career_level"], "entry")
        self.assertLessEqual(len(body["match"]["matched_keywords"]), 50)

    def test_match_rejects_blank_job_description(self):
        response = self.client.post(
            "/v1/ats/match",
            json={"resume_text": self.resume_text, "jd_text": " "},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Could not read text from resume or JD.")


if __name__ == "__main__":
    unittest.main()
