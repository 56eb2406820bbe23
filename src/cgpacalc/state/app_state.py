from dataclasses import dataclass, field

from cgpacalc.state.session_state import CalculatorSession


@dataclass
class AppState:
    session: CalculatorSession = field(default_factory=CalculatorSession)
