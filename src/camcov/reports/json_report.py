import json
from camcov.coverage import CoverageResult


class JSONReporter:
    """Generates JSON coverage reports"""

    def generate(self, result: CoverageResult, output_path: str, summary=None):
        """Write the verdict (and optional lattice summary) to a JSON file"""
        report = {
            "sufficient": result.sufficient,
            "reason": result.reason,
            "failed_stripe": result.failed_stripe.to_dict() if result.failed_stripe else None,
            "uncovered_corners": [list(p) for p in result.uncovered_corners],
            "effective_cameras": result.effective_cameras,
            "stripes_checked": result.stripes_checked,
            "notes": list(result.notes),
        }
        if summary is not None:
            report["lattice"] = {
                "points": summary.points,
                "covered": summary.covered,
                "uncovered": summary.uncovered,
                "coverage_pct": round(summary.coverage_pct, 3),
                "single_covered": summary.single_covered,
            }

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)

        return report
