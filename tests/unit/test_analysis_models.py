from app.analyzer.models import AnalysisResult, LabResult, Medication


class TestLabResult:
    def test_high_and_low_are_abnormal(self) -> None:
        assert LabResult(test="Glucose", status="H").is_abnormal
        assert LabResult(test="Iron", status="L").is_abnormal

    def test_normal_is_not_abnormal(self) -> None:
        assert not LabResult(test="Sodium", status=None).is_abnormal

    def test_to_dict_uses_range_key(self) -> None:
        result = LabResult(test="Glucose", value="130", reference_range="70-99", status="H")
        assert result.to_dict() == {
            "test": "Glucose",
            "value": "130",
            "range": "70-99",
            "status": "H",
        }


class TestAnalysisResult:
    def test_defaults(self) -> None:
        result = AnalysisResult()
        assert result.document_type == "unknown"
        assert result.date == "Not specified"
        assert result.doctor == "Not specified"
        assert result.lab_results == []
        assert result.medications == []
        assert result.summary == "No summary provided"
        assert result.error is False

    def test_abnormal_flags_counts_high_and_low(self) -> None:
        result = AnalysisResult(
            lab_results=[
                LabResult(test="Glucose", status="H"),
                LabResult(test="Iron", status="L"),
                LabResult(test="Sodium"),
            ]
        )
        assert result.abnormal_flags == 2

    def test_to_dict_wire_shape(self) -> None:
        result = AnalysisResult(
            document_type="prescription",
            date="2024-03-14",
            doctor="Dr. Smith",
            medications=[Medication(name="Amoxicillin", dosage="500mg")],
            documents_analyzed=2,
            summary="One antibiotic",
        )
        payload = result.to_dict()
        assert payload["type"] == "prescription"
        assert payload["documents_analyzed"] == 2
        assert payload["abnormal_flags"] == 0
        assert payload["medications"] == [
            {
                "name": "Amoxicillin",
                "dosage": "500mg",
                "frequency": "",
                "duration": "",
                "instructions": "",
            }
        ]
        assert "error" not in payload
        assert "raw_text" not in payload

    def test_to_dict_includes_error_fields_when_degraded(self) -> None:
        result = AnalysisResult(raw_text="combined", error=True)
        payload = result.to_dict()
        assert payload["error"] is True
        assert payload["raw_text"] == "combined"
