"""Unit tests for ConnectionService."""

from datetime import datetime
from uuid import uuid4

import pytest

from nexus.domain.error import BusinessRuleViolationError, NotFoundError
from nexus.domain.model import Connection
from nexus.domain.repository import (
    ConnectionRepository,
    ContactRepository,
    ProfileRepository,
)
from nexus.domain.service import ConnectionService
from nexus.domain.value import (
    CONNECTION_RELATIONSHIP,
    ConnectionId,
    ConnectionStatus,
    ContactId,
    InviteCode,
    RedemptionOutcome,
    UserId,
)
from nexus.domain.service.connection_service import (
    INVITE_CODE_ALPHABET,
    generate_invite_code,
)
from tests.conftest import create_contact, create_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _pending(
    connection_repo: ConnectionRepository,
    inviter_id: UserId,
    code: str,
    contact_id: ContactId | None = None,
) -> Connection:
    return await connection_repo.insert(
        Connection(
            id=ConnectionId(uuid4()),
            invite_code=InviteCode(code),
            inviter_id=inviter_id,
            contact_id=contact_id,
            status=ConnectionStatus.PENDING,
            created_at=datetime.now(),
        )
    )


class TestGenerateInviteCode:
    """Tests for the invite code format."""

    def test_code_has_prefix_and_six_unambiguous_characters(self):
        """Generated codes are NEXUS- plus six characters without 0/O/1/I."""
        for _ in range(50):
            code = generate_invite_code()

            assert code.startswith("NEXUS-")
            suffix = code.removeprefix("NEXUS-")
            assert len(suffix) == 6
            assert all(ch in INVITE_CODE_ALPHABET for ch in suffix)


class TestRedeemInvite:
    """Tests for redeem_invite."""

    @pytest.mark.asyncio
    async def test_redeem_scenario_connects_both_users(self, unit_env):
        """U2 redeeming U1's NEXUS-7Q2K9P accepts it and creates both cards."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        u1 = await create_profile(profile_repo, "Ada Lovelace", location="London")
        u2 = await create_profile(profile_repo, "Grace Hopper", website="https://navy.mil")
        connection = await _pending(connection_repo, u1.id, "NEXUS-7Q2K9P")

        # Act
        result = await service.redeem_invite(u2.id, "NEXUS-7Q2K9P")

        # Assert
        assert result.outcome == RedemptionOutcome.OK
        assert result.ok
        assert result.connection_id == connection.id

        stored = connection_repo.all()
        assert len(stored) == 1
        accepted = stored[0]
        assert accepted.status == ConnectionStatus.ACCEPTED
        assert accepted.invitee_id == u2.id
        assert accepted.accepted_at is not None
        assert accepted.contact_id == result.inviter_contact_id

        u1_card = await contact_repo.find_by_owner_and_linked_profile(u1.id, u2.id)
        u2_card = await contact_repo.find_by_owner_and_linked_profile(u2.id, u1.id)
        assert u1_card is not None
        assert u1_card.full_name == "Grace Hopper"
        assert u1_card.website == "https://navy.mil"
        assert u1_card.relationship_type == CONNECTION_RELATIONSHIP
        assert u2_card is not None
        assert u2_card.full_name == "Ada Lovelace"
        assert u2_card.location == "London"
        assert u2_card.email == u1.email
        assert u2_card.id == result.invitee_contact_id

    @pytest.mark.asyncio
    async def test_code_is_normalized_before_lookup(self, unit_env):
        """Lower-case code with surrounding whitespace finds the stored code."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        await _pending(connection_repo, inviter.id, "NEXUS-AB12CD")

        # Act
        result = await service.redeem_invite(invitee.id, " nexus-ab12cd ")

        # Assert
        assert result.outcome == RedemptionOutcome.OK

    @pytest.mark.asyncio
    async def test_unknown_code_changes_nothing(self, unit_env):
        """An unknown code reports not_found without raising or writing."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        await _pending(connection_repo, inviter.id, "NEXUS-AAAAAA")

        # Act
        result = await service.redeem_invite(invitee.id, "NEXUS-ZZZZZZ")

        # Assert
        assert result.outcome == RedemptionOutcome.NOT_FOUND
        assert connection_repo.all()[0].status == ConnectionStatus.PENDING
        assert contact_repo.all() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_code", ["", "   ", "X" * 40])
    async def test_malformed_code_is_not_found(self, unit_env, raw_code):
        """Blank or oversized codes report not_found."""
        # Arrange
        service = await unit_env.get(ConnectionService)

        # Act
        result = await service.redeem_invite(UserId(uuid4()), raw_code)

        # Assert
        assert result.outcome == RedemptionOutcome.NOT_FOUND

    @pytest.mark.asyncio
    async def test_self_invite_is_rejected(self, unit_env):
        """Redeeming your own code reports self_invite and writes nothing."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        await _pending(connection_repo, inviter.id, "NEXUS-SELF22")

        # Act
        result = await service.redeem_invite(inviter.id, "NEXUS-SELF22")

        # Assert
        assert result.outcome == RedemptionOutcome.SELF_INVITE
        assert connection_repo.all()[0].status == ConnectionStatus.PENDING
        assert connection_repo.all()[0].invitee_id is None
        assert contact_repo.all() == []

    @pytest.mark.asyncio
    async def test_redeem_twice_is_idempotent(self, unit_env):
        """A second redemption writes nothing and reports already connected."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        await _pending(connection_repo, inviter.id, "NEXUS-TWICE2")

        # Act
        first = await service.redeem_invite(invitee.id, "NEXUS-TWICE2")
        second = await service.redeem_invite(invitee.id, "NEXUS-TWICE2")

        # Assert
        assert first.outcome == RedemptionOutcome.OK
        # The code is no longer pending, so the lookup misses
        assert second.outcome == RedemptionOutcome.NOT_FOUND
        accepted = [
            c for c in connection_repo.all() if c.status == ConnectionStatus.ACCEPTED
        ]
        assert len(accepted) == 1
        assert len(contact_repo.all()) == 2

    @pytest.mark.asyncio
    async def test_second_code_between_connected_users_is_already_connected(
        self, unit_env
    ):
        """Another pending code between connected users is not accepted."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        await _pending(connection_repo, inviter.id, "NEXUS-FIRST2")
        await _pending(connection_repo, inviter.id, "NEXUS-OTHER2")
        await service.redeem_invite(invitee.id, "NEXUS-FIRST2")

        # Act
        result = await service.redeem_invite(invitee.id, "NEXUS-OTHER2")

        # Assert
        assert result.outcome == RedemptionOutcome.ALREADY_CONNECTED
        other = next(
            c for c in connection_repo.all() if c.invite_code.root == "NEXUS-OTHER2"
        )
        assert other.status == ConnectionStatus.PENDING
        assert len(contact_repo.all()) == 2

    @pytest.mark.asyncio
    async def test_reverse_direction_connection_blocks_redemption(self, unit_env):
        """An accepted U2 -> U1 connection blocks U1 redeeming U2's new code."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        u1 = await create_profile(profile_repo, "User One")
        u2 = await create_profile(profile_repo, "User Two")
        await _pending(connection_repo, u1.id, "NEXUS-U1TOU2")
        await service.redeem_invite(u2.id, "NEXUS-U1TOU2")
        await _pending(connection_repo, u2.id, "NEXUS-U2TOU1")
        contacts_before = contact_repo.all()

        # Act
        result = await service.redeem_invite(u1.id, "NEXUS-U2TOU1")

        # Assert
        assert result.outcome == RedemptionOutcome.ALREADY_CONNECTED
        reverse = next(
            c for c in connection_repo.all() if c.invite_code.root == "NEXUS-U2TOU1"
        )
        assert reverse.status == ConnectionStatus.PENDING
        assert contact_repo.all() == contacts_before

    @pytest.mark.asyncio
    async def test_missing_profile_is_reported(self, unit_env):
        """An invitee without a profile gets missing_profile and no cards."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        await _pending(connection_repo, inviter.id, "NEXUS-NOPROF")

        # Act
        result = await service.redeem_invite(UserId(uuid4()), "NEXUS-NOPROF")

        # Assert
        assert result.outcome == RedemptionOutcome.MISSING_PROFILE
        assert connection_repo.all()[0].status == ConnectionStatus.PENDING
        assert contact_repo.all() == []

    @pytest.mark.asyncio
    async def test_placeholder_contact_is_linked_not_duplicated(self, unit_env):
        """The inviter's placeholder card becomes the linked card."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        placeholder = await create_contact(
            contact_repo, inviter.id, "Future Friend", company="Acme"
        )
        await _pending(connection_repo, inviter.id, "NEXUS-PLACE2", placeholder.id)

        # Act
        result = await service.redeem_invite(invitee.id, "NEXUS-PLACE2")

        # Assert
        assert result.outcome == RedemptionOutcome.OK
        assert result.inviter_contact_id == placeholder.id
        inviter_cards = [c for c in contact_repo.all() if c.owner_id == inviter.id]
        assert len(inviter_cards) == 1
        assert inviter_cards[0].linked_profile_id == invitee.id
        # Placeholder keeps what the inviter wrote
        assert inviter_cards[0].full_name == "Future Friend"
        assert inviter_cards[0].company == "Acme"
        assert connection_repo.all()[0].contact_id == placeholder.id

    @pytest.mark.asyncio
    async def test_existing_linked_card_is_reused(self, unit_env):
        """A card the inviter already linked to the invitee is reused."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        linked = await create_contact(
            contact_repo, inviter.id, "Known Invitee", linked_profile_id=invitee.id
        )
        placeholder = await create_contact(contact_repo, inviter.id, "Placeholder")
        await _pending(connection_repo, inviter.id, "NEXUS-REUSE2", placeholder.id)

        # Act
        result = await service.redeem_invite(invitee.id, "NEXUS-REUSE2")

        # Assert
        assert result.outcome == RedemptionOutcome.OK
        assert result.inviter_contact_id == linked.id
        untouched = await contact_repo.find_by_id(placeholder.id)
        assert untouched.linked_profile_id is None

    @pytest.mark.asyncio
    async def test_store_failure_is_upstream_error(self, unit_env, monkeypatch):
        """A failing store call is reported, not raised."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        connection_repo = await unit_env.get(ConnectionRepository)

        async def broken(code):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(connection_repo, "find_pending_by_code", broken)

        # Act
        result = await service.redeem_invite(UserId(uuid4()), "NEXUS-ANY222")

        # Assert
        assert result.outcome == RedemptionOutcome.UPSTREAM_ERROR

    @pytest.mark.asyncio
    async def test_lost_race_reports_already_connected(self, unit_env, monkeypatch):
        """When the conditional accept updates nothing, the loser is told so."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        await _pending(connection_repo, inviter.id, "NEXUS-RACE22")

        async def already_taken(*args, **kwargs):
            return False

        monkeypatch.setattr(connection_repo, "mark_accepted", already_taken)

        # Act
        result = await service.redeem_invite(invitee.id, "NEXUS-RACE22")

        # Assert
        assert result.outcome == RedemptionOutcome.ALREADY_CONNECTED

    @pytest.mark.asyncio
    async def test_failure_after_accept_undoes_redemption(self, unit_env, monkeypatch):
        """A store error mid-redemption rolls back the accept and keeps the code."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        await _pending(connection_repo, inviter.id, "NEXUS-UNDO22")
        accept = connection_repo.mark_accepted

        async def accept_then_fail(*args, **kwargs):
            await accept(*args, **kwargs)
            raise RuntimeError("connection reset")

        monkeypatch.setattr(connection_repo, "mark_accepted", accept_then_fail)

        # Act
        result = await service.redeem_invite(invitee.id, "NEXUS-UNDO22")

        # Assert
        assert result.outcome == RedemptionOutcome.UPSTREAM_ERROR
        pending = await connection_repo.find_pending_by_code(InviteCode("NEXUS-UNDO22"))
        assert pending is not None
        assert pending.invitee_id is None
        assert await profile_repo.find_by_id(invitee.id) is not None


class TestCreateInvite:
    """Tests for create_invite."""

    @pytest.mark.asyncio
    async def test_create_invite_stores_pending_connection(self, unit_env):
        """A new invite is a pending connection pointing at the contact."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        contact = await create_contact(contact_repo, inviter.id)

        # Act
        code = await service.create_invite(inviter.id, contact.id)

        # Assert
        assert code.startswith("NEXUS-")
        stored = connection_repo.all()
        assert len(stored) == 1
        assert stored[0].invite_code.root == code
        assert stored[0].status == ConnectionStatus.PENDING
        assert stored[0].contact_id == contact.id
        assert stored[0].invitee_id is None

    @pytest.mark.asyncio
    async def test_create_invite_reuses_pending_code(self, unit_env):
        """Asking twice for the same contact returns the same code."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)
        connection_repo = await unit_env.get(ConnectionRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        contact = await create_contact(contact_repo, inviter.id)

        # Act
        first = await service.create_invite(inviter.id, contact.id)
        second = await service.create_invite(inviter.id, contact.id)

        # Assert
        assert first == second
        assert len(connection_repo.all()) == 1

    @pytest.mark.asyncio
    async def test_create_invite_for_foreign_contact_raises(self, unit_env):
        """Contacts owned by someone else are not found."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)

        owner = await create_profile(profile_repo, "Owner")
        stranger = await create_profile(profile_repo, "Stranger")
        contact = await create_contact(contact_repo, owner.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.create_invite(stranger.id, contact.id)

    @pytest.mark.asyncio
    async def test_create_invite_retries_on_collision(self, unit_env):
        """A colliding code is retried with the next generated code."""
        # Arrange
        connection_repo = await unit_env.get(ConnectionRepository)
        contact_repo = await unit_env.get(ContactRepository)
        profile_repo = await unit_env.get(ProfileRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        contact = await create_contact(contact_repo, inviter.id)
        await _pending(connection_repo, inviter.id, "NEXUS-TAKEN2")

        codes = iter(["NEXUS-TAKEN2", "NEXUS-FRESH2"])
        service = ConnectionService(
            connection_repository=connection_repo,
            contact_repository=contact_repo,
            profile_repository=profile_repo,
            code_generator=lambda: next(codes),
        )

        # Act
        code = await service.create_invite(inviter.id, contact.id)

        # Assert
        assert code == "NEXUS-FRESH2"

    @pytest.mark.asyncio
    async def test_create_invite_gives_up_after_five_collisions(self, unit_env):
        """Five collisions in a row fail with a business rule error."""
        # Arrange
        connection_repo = await unit_env.get(ConnectionRepository)
        contact_repo = await unit_env.get(ContactRepository)
        profile_repo = await unit_env.get(ProfileRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        contact = await create_contact(contact_repo, inviter.id)
        await _pending(connection_repo, inviter.id, "NEXUS-TAKEN2")

        attempts = []

        def always_taken() -> str:
            attempts.append(1)
            return "NEXUS-TAKEN2"

        service = ConnectionService(
            connection_repository=connection_repo,
            contact_repository=contact_repo,
            profile_repository=profile_repo,
            code_generator=always_taken,
        )

        # Act & Assert
        with pytest.raises(
            BusinessRuleViolationError,
            match="Failed to generate unique code after 5 attempts",
        ):
            await service.create_invite(inviter.id, contact.id)
        assert len(attempts) == 5


class TestListConnections:
    """Tests for connection queries."""

    @pytest.mark.asyncio
    async def test_lists_accepted_on_both_sides_and_pending_with_names(
        self, unit_env
    ):
        """Both users see the accepted connection; pending invites carry names."""
        # Arrange
        service = await unit_env.get(ConnectionService)
        profile_repo = await unit_env.get(ProfileRepository)
        contact_repo = await unit_env.get(ContactRepository)

        inviter = await create_profile(profile_repo, "Inviter")
        invitee = await create_profile(profile_repo, "Invitee")
        first = await create_contact(contact_repo, inviter.id, "First Friend")
        second = await create_contact(contact_repo, inviter.id, "Second Friend")
        code = await service.create_invite(inviter.id, first.id)
        await service.create_invite(inviter.id, second.id)
        await service.redeem_invite(invitee.id, code)

        # Act
        inviter_connections = await service.list_connections(inviter.id)
        invitee_connections = await service.list_connections(invitee.id)
        pending = await service.list_pending_invites(inviter.id)

        # Assert
        assert len(inviter_connections) == 1
        assert [c.id for c in invitee_connections] == [inviter_connections[0].id]
        assert len(pending) == 1
        assert pending[0].contact_name == "Second Friend"
