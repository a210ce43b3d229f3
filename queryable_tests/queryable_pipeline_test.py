import inspect
import suite
from queryable import of, from_iterable, from_range, is_queryable, IQueryable, Queryable, Step

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


def tracked_source(items, log):
    """generator that records pulls and whether it was closed"""
    try:
        for item in items:
            log.append(('pull', item))
            yield item
    finally:
        log.append(('closed', None))


# advance() tests

@test("advance returns value/done steps")
def test_advance_steps():
    q = of('a', 'b')
    assert_that(q.advance() == Step('a', False), "first step")
    assert_that(q.advance() == Step('b', False), "second step")
    step = q.advance()
    assert_that(step.done, "third step should be done")


@test("advance stays done after exhaustion")
def test_advance_sticky_done():
    q = of(1)
    q.advance()
    for _ in range(3):
        assert_that(q.advance().done, "every later call should be done")


@test("advance and iteration share the same cursor")
def test_advance_and_iter_share_cursor():
    q = of(1, 2, 3, 4)
    assert_that(q.advance().value == 1, "advance takes the first element")
    assert_that(next(q) == 2, "next continues from the same cursor")
    assert_that(list(q) == [3, 4], "iteration sees only what is left")
    assert_that(list(q) == [], "there is no restart")


@test("iter returns the queryable itself")
def test_iter_is_self():
    q = of(1)
    assert_that(iter(q) is q, "iter() should not create a second cursor")


@test("single pass: a drained queryable stays empty")
def test_single_pass():
    q = from_range(3)
    assert_that(q.to.list() == [0, 1, 2], "first traversal")
    assert_that(q.to.list() == [], "second traversal is empty")


@test("upstream and stage read the same cursor")
def test_stage_consumes_upstream():
    source = of(1, 2, 3, 4, 5)
    doubled = source.map(lambda x: x * 2)
    assert_that(next(doubled) == 2, "stage pulls from source")
    assert_that(next(source) == 2, "source continues after the pulled element")
    assert_that(doubled.to.list() == [6, 8, 10], "stage continues after the source")


# close() tests

@test("close reaches the original source")
def test_close_propagates():
    log = []
    q = from_iterable(tracked_source([1, 2, 3], log)).map(lambda x: x + 1).filter(lambda x: True)
    assert_that(next(q) == 2, "first element through the chain")
    q.close()
    assert_that(('closed', None) in log, f"source finally block should run: {log}")
    assert_that(q.advance().done, "closed queryable reports done")


@test("close is idempotent")
def test_close_twice():
    log = []
    q = from_iterable(tracked_source([1], log)).reverse()
    q.close()
    q.close()
    assert_that(log.count(('closed', None)) <= 1, f"source closed at most once: {log}")


@test("close on an unstarted pipeline does not pull")
def test_close_unstarted():
    log = []
    q = from_iterable(tracked_source([1, 2], log)).shift(1)
    q.close()
    assert_that(not any(kind == 'pull' for kind, _ in log), f"nothing should be pulled: {log}")


@test("context manager closes the pipeline")
def test_context_manager():
    log = []
    with from_iterable(tracked_source(range(100), log)).map(lambda x: x) as q:
        first = next(q)
    assert_that(first == 0, "first element inside the block")
    assert_that(log[-1] == ('closed', None), f"source should be closed on exit: {log[-3:]}")


@test("repr shows the cursor state")
def test_repr():
    q = of(1)
    assert_that(repr(q) == "Queryable(live)", f"fresh: {q!r}")
    list(q)
    q.advance()
    assert_that(repr(q) == "Queryable(exhausted)", f"drained: {q!r}")
    q.close()
    assert_that(repr(q) == "Queryable(closed)", f"closed: {q!r}")


# capability propagation tests

COMBINATORS = [
    'map', 'filter', 'concat', 'reverse', 'push', 'unshift', 'shift', 'pop', 'slice',
    'splice', 'flat', 'flat_map', 'keys', 'values', 'entries', 'find_index', 'find',
    'some', 'every', 'index_of', 'last_index_of', 'includes', 'for_each', 'reduce',
    'reduce_right', 'join', 'advance', 'close'
]


@test("the interface declares the whole combinator set")
def test_interface_is_complete():
    missing = [name for name in COMBINATORS if name not in IQueryable.__abstractmethods__]
    assert_that(not missing, f"abstract methods missing from the interface: {missing}")
    assert_that(inspect.isabstract(IQueryable), "the interface cannot be instantiated")
    assert_that(not inspect.isabstract(Queryable), "the concrete class implements everything")


@test("every combinator result exposes the full surface")
def test_every_stage_is_complete():
    base = lambda: from_range(10)
    stages = [
        base().map(lambda x: x), base().filter(lambda x: x), base().concat([1]), base().reverse(),
        base().push(1), base().unshift(1), base().shift(), base().pop(), base().slice(1, 3),
        base().slice(-2), base().slice(1, -1), base().splice(1, 1), base().flat(),
        base().flat_map(lambda x: [x]), base().keys(), base().values(), base().entries(),
    ]
    for stage in stages:
        assert_that(is_queryable(stage), f"{stage!r} should be queryable")
        for name in COMBINATORS:
            assert_that(callable(getattr(stage, name, None)), f"{name} missing on a stage")


@test("combinators chain in any order")
def test_chain_any_order():
    a = from_range(20).map(lambda x: x * 2).filter(lambda x: x % 3 == 0).slice(1, 4).to.list()
    b = from_range(20).slice(1, 10).filter(lambda x: x % 3 == 0).map(lambda x: x * 2).to.list()
    c = from_range(20).filter(lambda x: x % 3 == 0).slice(1, -1).map(lambda x: x * 2).reverse().to.list()
    assert_that(a == [6, 12, 18], f"map-filter-slice: {a}")
    assert_that(b == [6, 12, 18], f"slice-filter-map: {b}")
    assert_that(c == [30, 24, 18, 12, 6], f"filter-slice-map-reverse: {c}")


if __name__ == "__main__":
    suite.run(title="queryable pipeline test suite")
