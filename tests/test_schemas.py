"""
schemas.py 모듈 단위 테스트
- validate_evaluation_output: 출력 스키마 검증
- get_empty_evaluation_output: 빈 템플릿
"""
from src.schemas import get_empty_evaluation_output, validate_evaluation_output


def _counts(**overrides):
    counts = {"early_on_time": 1, "late_on_time": 1, "early": 1, "late": 1, "total": 4}
    counts.update(overrides)
    return counts


class TestValidateEvaluationOutput:

    def test_valid(self):
        data = {
            "source": "orders.txt",
            "deliveryMetrics": {"2020-12-05": _counts()},
            "invalidLinesCount": 0,
        }
        assert validate_evaluation_output(data) is True

    def test_missing_top_level_key(self):
        assert validate_evaluation_output({"source": "x", "deliveryMetrics": {}}) is False

    def test_missing_count_key(self):
        counts = _counts()
        del counts["late"]
        data = {"source": "x", "deliveryMetrics": {"2020-12-05": counts}, "invalidLinesCount": 0}

        assert validate_evaluation_output(data) is False

    def test_inconsistent_total(self):
        """total != 상태 합"""
        data = {"source": "x", "deliveryMetrics": {"2020-12-05": _counts(total=5)}, "invalidLinesCount": 0}

        assert validate_evaluation_output(data) is False


class TestEmptyTemplate:

    def test_empty_output_is_valid(self):
        data = get_empty_evaluation_output("orders.txt")

        assert data["source"] == "orders.txt"
        assert data["deliveryMetrics"] == {}
        assert data["invalidLinesCount"] == 0
        assert validate_evaluation_output(data) is True
