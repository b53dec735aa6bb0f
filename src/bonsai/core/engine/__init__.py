"""
Growth engine and its animation driver.

Example:
    from bonsai.core.engine import GrowthEngine

    engine = GrowthEngine(seed=7, life_start=30)
    engine.seed()
    while engine.advance_step():
        pass
    print(engine.to_text())
"""

from bonsai.core.engine.driver import GrowthDriver
from bonsai.core.engine.growth_engine import POT_LINES, GrowthEngine

__all__ = ["GrowthDriver", "GrowthEngine", "POT_LINES"]
