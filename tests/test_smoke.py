import json
import os
import subprocess
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

def test_run_cuadre_smoke():
    result = subprocess.run([sys.executable, "src/run_cuadre.py"], capture_output=True, text=True, cwd=ROOT)
    assert result.returncode == 0, result.stderr
    assert os.path.exists(os.path.join(ROOT, "outputs/cuadre_result.json"))
    assert os.path.exists(os.path.join(ROOT, "outputs/daily_summary.csv"))
    assert os.path.exists(os.path.join(ROOT, "outputs/system_summary.csv"))
    assert os.path.exists(os.path.join(ROOT, "outputs/exceptions.csv"))
    assert "CUADRADO" in result.stdout

    with open(os.path.join(ROOT, "outputs/cuadre_result.json")) as f:
        summary = json.load(f)
    assert summary["verdict"] == "CUADRADO"
    assert summary["weekly"] is True
    assert summary["result"]["final_discrepancy"] == 32.0
    assert summary["exceptions_rows"] == 1
