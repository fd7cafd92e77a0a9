from typing import List, Optional

DASHBOARD_PATH = "/dashboard"
CLASSES_PATH = "/classes"


def class_path(class_id: str) -> str:
    return f"{CLASSES_PATH}/{class_id}"


class StalePaths:
    """요청 단위로 생성되는 '다시 계산해야 할 화면 경로' 수집기"""

    def __init__(self):
        self._paths: List[str] = []

    def mark(self, *paths: str) -> None:
        for path in paths:
            if path not in self._paths:
                self._paths.append(path)

    @property
    def paths(self) -> List[str]:
        return list(self._paths)

    def __contains__(self, path: str) -> bool:
        return path in self._paths


def mark_stale(stale: Optional[StalePaths], *paths: str) -> None:
    if stale is not None:
        stale.mark(*paths)
