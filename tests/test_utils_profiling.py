from pathlib import Path
import pstats

from advent_grid.core.risk_map import RiskMap
from advent_grid.utils.profiling import profile_search


def test_profile_search_creates_dump(tmp_path: Path, cave_grid) -> None:
    out = tmp_path / "search.prof"
    result, stats = profile_search(RiskMap(cave_grid, 1), out)

    assert result == 40
    assert out.exists()
    assert isinstance(stats, pstats.Stats)
    assert any("a_star" in func[2] for func in stats.stats)
