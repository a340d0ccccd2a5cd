import argparse
import sys
from pathlib import Path

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from wiktcards.storage import read_jsonl


def trunc(s, n=80):
    s = s or ""
    return s if len(s) <= n else s[:n] + "…"


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--jsonl", required=True)
    ap.add_argument("--word", default=None)
    ap.add_argument("--examples", type=int, default=3)
    a = ap.parse_args()
    found = False
    for rec in read_jsonl(Path(a.jsonl)):
        if a.word is not None and rec.word != a.word:
            continue
        found = True
        print(f"Word: {rec.word}  ({rec.link})")
        if rec.pronunciation:
            print(f"  IPA: {rec.pronunciation.ipa}")
        for i, m in enumerate(rec.meanings):
            print(f'    - Sense[{i}] {m.pos.name} "{trunc(m.definition)}"')
            for j, ex in enumerate(m.examples[: a.examples]):
                line = f'        EX[{j}]: "{trunc(ex.text, 100)}"'
                if ex.translation:
                    line += f' -- "{trunc(ex.translation, 100)}"'
                print(line)
    if not found:
        print("(no record)")


if __name__ == "__main__":
    main()
