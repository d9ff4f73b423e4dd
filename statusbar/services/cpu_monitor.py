from statusbar.errors import ParseError
from statusbar.formatting import percentage
from statusbar.models.cpu import CPU_FIELDS, CpuDelta, CpuSample, CpuUsage
from statusbar.services.counters import CounterStore
from statusbar.services.pseudo_files import read_text


def _parse_cpu_stat(text: str) -> CpuSample:
    """
    Parse the aggregate "cpu" line of /proc/stat into a CpuSample.

    Only the first ten tick columns are used; newer kernels may append more.
    Raises ParseError if the line is missing or too short.
    """
    for line in text.splitlines():
        tokens = line.split()
        if not tokens or tokens[0] != "cpu":
            continue

        columns = tokens[1:]
        if len(columns) < len(CPU_FIELDS):
            raise ParseError(
                f"Aggregate cpu line has {len(columns)} fields, "
                f"expected at least {len(CPU_FIELDS)}"
            )
        try:
            ticks = [int(value) for value in columns[: len(CPU_FIELDS)]]
            return CpuSample(**dict(zip(CPU_FIELDS, ticks)))
        except ValueError as exc:
            # pydantic's ValidationError is a ValueError too (negative ticks)
            raise ParseError(f"Invalid tick counter in cpu line: {line!r}") from exc

    raise ParseError("No aggregate cpu line found in CPU statistics")


async def read_cpu_sample(path: str) -> CpuSample:
    return _parse_cpu_stat(await read_text(path))


def diff_cpu(store: CounterStore, sample: CpuSample) -> CpuDelta:
    """
    Difference between ``sample`` and the previous CPU sample in ``store``.

    The very first call has nothing to diff against and returns the sample
    itself (usage since boot); it is replaced one tick later. The store is
    always updated, and negative deltas after a counter reset are kept as-is.
    """
    if store.cpu is None:
        delta = CpuDelta.from_sample(sample)
    else:
        delta = CpuDelta.between(store.cpu, sample)

    store.cpu = sample
    return delta


def cpu_usage(delta: CpuDelta) -> CpuUsage:
    total = delta.total
    if total <= 0:
        return CpuUsage(busy_percent=0, iowait_percent=0)

    # A counter reset can yield negative parts; keep the display within 0..100
    busy = min(percentage(max(delta.busy_total, 0), total), 100)
    iowait = min(percentage(max(delta.iowait, 0), total), 100)
    return CpuUsage(busy_percent=busy, iowait_percent=iowait)
