from __future__ import annotations

from _infra import banner

import lazyseq as S
from kungfu import Error, Ok


def main() -> None:
    banner("01_quickstart: producers + transforms + join")

    squares = S.generate().map(lambda n: n * n)
    # Infinite, but only eight elements are ever computed.
    print(squares.drop(2).take(8).to_list())

    words = S.from_(["lazy", "sequences", "compose"])
    print(words.map(str.upper).join(", ").to_string())

    print(S.combine(lambda k, v: f"{k}: {v}", ["a", "b", "c"], S.range(1, 10)).to_list())

    match S.generate().filter(lambda n: n % 7 == 3).first():
        case Ok(value):
            print(f"first n with n % 7 == 3: {value}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    main()
