import pytest

from simcore.errors import UnsatisfiableRequestError
from simcore.resource import ResourcePool


class Recorder:
    def __init__(self):
        self.woken = []

    def wake(self, who):
        return lambda: self.woken.append(who)


def test_grants_immediately_while_capacity_allows():
    pool = ResourcePool("Office Workers", 2)
    rec = Recorder()
    assert pool.acquire('a', 1, 0, rec.wake('a'))
    assert pool.acquire('b', 1, 0, rec.wake('b'))
    assert not pool.acquire('c', 1, 0, rec.wake('c'))
    assert pool.in_use == 2
    assert pool.waiting == 1
    assert rec.woken == []


def test_release_admits_head_of_wait_line():
    pool = ResourcePool("Office Workers", 1)
    rec = Recorder()
    pool.acquire('a', 1, 0, rec.wake('a'))
    pool.acquire('b', 1, 0, rec.wake('b'))
    pool.acquire('c', 1, 0, rec.wake('c'))
    pool.release('a', 1)
    assert rec.woken == ['b']
    assert pool.holders == {'b': 1}
    assert pool.in_use == 1


def test_wait_line_orders_by_priority_then_arrival():
    pool = ResourcePool("Ride Workers", 1)
    rec = Recorder()
    pool.acquire('holder', 1, 0, rec.wake('holder'))
    pool.acquire('low-1', 1, 4, rec.wake('low-1'))
    pool.acquire('high', 1, 2, rec.wake('high'))
    pool.acquire('low-2', 1, 4, rec.wake('low-2'))
    for who in ('holder', 'high', 'low-1'):
        pool.release(who, 1)
    assert rec.woken == ['high', 'low-1', 'low-2']


def test_request_that_fits_is_granted_past_a_stuck_waiter():
    pool = ResourcePool("Universal Workers", 3)
    rec = Recorder()
    pool.acquire('a', 2, 0, rec.wake('a'))
    assert not pool.acquire('big', 3, 0, rec.wake('big'))
    assert pool.acquire('small', 1, 0, rec.wake('small'))
    assert pool.in_use == 3
    assert pool.waiting == 1
    pool.release('a', 2)
    assert rec.woken == []
    pool.release('small', 1)
    assert rec.woken == ['big']
    assert pool.in_use == 3


def test_waiter_that_does_not_fit_blocks_those_behind():
    pool = ResourcePool("Universal Workers", 3)
    rec = Recorder()
    pool.acquire('a', 3, 0, rec.wake('a'))
    pool.acquire('big', 3, 0, rec.wake('big'))
    pool.acquire('small', 1, 0, rec.wake('small'))
    assert pool.waiting == 2
    pool.release('a', 1)
    assert rec.woken == []
    assert pool.waiting == 2
    pool.release('a', 2)
    assert rec.woken == ['big']
    assert pool.waiting == 1


def test_capacity_increase_admits_waiters_at_once():
    pool = ResourcePool("Ride Workers", 1)
    rec = Recorder()
    pool.acquire('a', 1, 0, rec.wake('a'))
    pool.acquire('b', 1, 0, rec.wake('b'))
    pool.acquire('c', 1, 0, rec.wake('c'))
    pool.set_capacity(3)
    assert rec.woken == ['b', 'c']
    assert pool.in_use == 3 <= pool.capacity


def test_set_capacity_twice_is_idempotent():
    pool = ResourcePool("Ride Workers", 1)
    rec = Recorder()
    pool.acquire('a', 1, 0, rec.wake('a'))
    pool.acquire('b', 1, 0, rec.wake('b'))
    pool.acquire('c', 1, 0, rec.wake('c'))
    pool.set_capacity(2)
    in_use = pool.in_use
    pool.set_capacity(2)
    assert rec.woken == ['b']
    assert pool.in_use == in_use == 2
    assert pool.entries == 2


def test_capacity_decrease_never_evicts():
    pool = ResourcePool("Office Workers", 3)
    rec = Recorder()
    for who in 'abc':
        pool.acquire(who, 1, 0, rec.wake(who))
    pool.acquire('d', 1, 0, rec.wake('d'))
    pool.set_capacity(1)
    assert pool.in_use == 3
    assert pool.free == 0
    pool.release('a', 1)
    pool.release('b', 1)
    assert rec.woken == []
    pool.release('c', 1)
    assert rec.woken == ['d']
    assert pool.in_use == 1 <= pool.capacity


def test_request_above_capacity_is_unsatisfiable():
    pool = ResourcePool("Ride Workers", 2)
    with pytest.raises(UnsatisfiableRequestError) as info:
        pool.acquire('a', 3, 0, lambda: None)
    assert info.value.capacity == 2
    assert pool.waiting == 0


def test_empty_pool_rejects_any_request():
    pool = ResourcePool("Ride Workers", 0)
    with pytest.raises(UnsatisfiableRequestError):
        pool.acquire('a', 1, 0, lambda: None)


def test_releasing_more_than_held_is_an_error():
    pool = ResourcePool("Office Workers", 2)
    pool.acquire('a', 1, 0, lambda: None)
    with pytest.raises(ValueError):
        pool.release('a', 2)
    with pytest.raises(ValueError):
        pool.release('b', 1)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        ResourcePool("Office Workers", -1)
    pool = ResourcePool("Office Workers", 1)
    with pytest.raises(ValueError):
        pool.set_capacity(-2)


def test_pool_statistics():
    pool = ResourcePool("Office Workers", 1)
    pool.acquire('a', 1, 0, lambda: None)
    pool.acquire('b', 1, 0, lambda: None)
    pool.acquire('c', 1, 0, lambda: None)
    pool.release('a', 1)
    assert pool.entries == 2
    assert pool.max_in_use == 1
    assert pool.max_queue_length == 2
    assert pool.release_all('b') == 1
    assert pool.release_all('nobody') == 0
