"""Tests for the friend graph."""

import pytest

from refmatch.core.errors import ConflictError, NotFoundError, ValidationError
from refmatch.services.friend_service import friend_service


async def test_add_friend(store, make_profile):
    alice = await make_profile("Alice")
    bob = await make_profile("Bob")

    friendship = await friend_service.add_friend(store, alice.id, bob.id)

    assert friendship.requester_id == alice.id
    assert friendship.addressee_id == bob.id
    assert friendship.status == "accepted"


async def test_add_friend_twice_conflicts(store, make_profile):
    """The reverse orientation counts as the same friendship."""
    alice = await make_profile("Alice")
    bob = await make_profile("Bob")
    await friend_service.add_friend(store, alice.id, bob.id)

    with pytest.raises(ConflictError) as exc_info:
        await friend_service.add_friend(store, bob.id, alice.id)
    assert exc_info.value.message == "Already friends"
    assert exc_info.value.status_code == 400

    with pytest.raises(ConflictError):
        await friend_service.add_friend(store, alice.id, bob.id)

    assert len(await store.list_friendships_for(alice.id)) == 1


async def test_insert_duplicate_pair_rejected_by_store(store, make_profile):
    """The store's pair key rejects duplicates even without the prior read."""
    alice = await make_profile("Alice")
    bob = await make_profile("Bob")
    await store.insert_friendship(alice.id, bob.id)

    with pytest.raises(ConflictError):
        await store.insert_friendship(bob.id, alice.id)


async def test_add_friend_unknown_user(store, make_profile):
    alice = await make_profile("Alice")
    with pytest.raises(NotFoundError):
        await friend_service.add_friend(store, alice.id, "missing")


async def test_add_self_rejected(store, make_profile):
    alice = await make_profile("Alice")
    with pytest.raises(ValidationError):
        await friend_service.add_friend(store, alice.id, alice.id)


async def test_add_unknown_self_is_not_found(store):
    with pytest.raises(NotFoundError):
        await friend_service.add_friend(store, "missing", "missing")


async def test_list_friends_from_both_sides(store, make_profile):
    alice = await make_profile("Alice")
    bob = await make_profile("Bob")
    carol = await make_profile("Carol")
    await friend_service.add_friend(store, alice.id, bob.id)
    await friend_service.add_friend(store, carol.id, alice.id)

    alice_friends = {p.id for p in await friend_service.list_friends(store, alice.id)}
    bob_friends = [p.id for p in await friend_service.list_friends(store, bob.id)]

    assert alice_friends == {bob.id, carol.id}
    assert bob_friends == [alice.id]
    assert await friend_service.list_friends(store, "nobody") == []
