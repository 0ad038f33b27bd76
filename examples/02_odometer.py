from __future__ import annotations

from _infra import banner

import lazyseq as S


def main() -> None:
    banner("02_odometer: permute over restartable wheels")

    hours = S.range(0, 24, 6)
    minutes = S.generate().map(lambda m: m * 15).take(4)
    clock = S.permute(lambda h, m: f"{h:02d}:{m:02d}", hours, minutes)
    clock.for_each(print)

    banner("02_odometer: infinite fast wheel, bounded by take")
    grid = S.permute(lambda row, col: (row, col), ["r0", "r1"], S.generate())
    print(grid.take(5).to_list())


if __name__ == "__main__":
    main()
