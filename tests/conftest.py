import io

import pytest

from calc_core import Calculator
from calc_control import CalculatorControl


@pytest.fixture
def calculator():
    return Calculator()


@pytest.fixture
def control():
    return CalculatorControl()


@pytest.fixture
def run_session(calculator, control):
    """Run a scripted interactive session; returns (stdout, stderr) text."""
    from calc import run_interactive

    def _run(script: str, quiet: bool = True):
        out, err = io.StringIO(), io.StringIO()
        status = run_interactive(calculator, control,
                                 input_stream=io.StringIO(script),
                                 output_stream=out, error_stream=err,
                                 quiet=quiet)
        assert status == 0
        return out.getvalue(), err.getvalue()

    return _run
