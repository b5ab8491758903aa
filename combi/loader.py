"""단어 목록(.txt) 로더: `combic complete --words FILE` 용"""

from __future__ import annotations
from pathlib    import Path
from typing     import List


def load_words(path: str) -> List[str]:
    """
    한 줄에 한 단어. 빈 줄과 '#' 주석 줄은 건너뜁니다.
    """
    text = Path(path).read_text(encoding="utf-8")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    out: List[str] = []
    for line in text.split("\n"):
        w = line.strip()
        if not w or w.startswith("#"):
            continue
        out.append(w)
    return out
