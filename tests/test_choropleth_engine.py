import unittest

from core.choropleth_engine import ChoroplethEngine


class ChoroplethEngineTest(unittest.TestCase):
    def test_run_returns_stats_and_normalized(self):
        entities = {
            "KR": {"access_rank": 12, "needs_rank": 30, "gdp": 100},
            "JP": {"access_rank": 52, "needs_rank": None, "gdp": 300},
            "CN": {"access_rank": "", "needs_rank": 61, "gdp": 200},
        }
        result = ChoroplethEngine().run(entities, ["access_rank", "needs_rank", "gdp"])

        stats = result["stats"]
        self.assertEqual((stats["gdp"].min, stats["gdp"].max), (100, 300))
        self.assertEqual(stats["access_rank"].count, 2)

        normalized = result["normalized"]
        self.assertEqual(set(normalized), {"KR", "JP", "CN"})
        self.assertEqual(normalized["KR"]["access_rank"], 1)
        self.assertEqual(normalized["JP"]["access_rank"], 4)
        self.assertIsNone(normalized["CN"]["access_rank"])
        self.assertEqual(normalized["KR"]["needs_rank"], 6)
        self.assertIsNone(normalized["JP"]["needs_rank"])
        self.assertEqual(normalized["CN"]["needs_rank"], 10)
        self.assertEqual([normalized[k]["gdp"] for k in ("KR", "CN", "JP")], [3, 5, 6])

    def test_warns_when_field_has_no_data(self):
        with self.assertLogs("core.choropleth_engine", level="WARNING") as logs:
            result = ChoroplethEngine().run({"A": {"x": None}}, ["x"])
        self.assertTrue(result["stats"]["x"].is_empty)
        self.assertIsNone(result["normalized"]["A"]["x"])
        self.assertIn("No valid values for field x", logs.output[0])

    def test_policy_document_and_id_field(self):
        engine = ChoroplethEngine(
            policies={"score": {"policy": "scale", "scale_range": [1, 11]}},
            id_field="isoCode",
        )
        result = engine.run({"A": {"score": 0}, "B": {"score": 10}}, ("score",))
        self.assertEqual(result["normalized"]["A"]["isoCode"], "A")
        self.assertEqual(result["normalized"]["B"]["score"], 11)


if __name__ == "__main__":
    unittest.main()
