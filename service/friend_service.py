"""
FriendService

친구 요청/수락/거절과 친구 목록 조회를 담당합니다.
친구 관계는 friends 테이블 한 행이 유일한 근거이며, 수익 분배에서는
수락된 관계 수만 사용합니다.
"""
import logging
from typing import List

from tortoise.exceptions import IntegrityError

from exceptions import (
    AlreadyFriendsError,
    FriendRequestExistsError,
    FriendRequestNotFoundError,
    ValidationError,
)
from models import Friend, FriendStatus, User
from models.repos import friend_repo
from service.account_service import AccountService

logger = logging.getLogger(__name__)


class FriendService:
    """친구 관계 비즈니스 로직"""

    @staticmethod
    async def send_request(from_telegram_id: str, to_telegram_id: str) -> Friend:
        """
        친구 요청 보내기

        처음 보는 계정은 기본값으로 생성합니다.

        Args:
            from_telegram_id: 요청자 telegram_id
            to_telegram_id: 수신자 telegram_id

        Returns:
            생성(또는 재개)된 Friend 행

        Raises:
            ValidationError: 자기 자신에게 요청
            AlreadyFriendsError: 이미 친구
            FriendRequestExistsError: 이미 대기 중인 요청 존재
        """
        if str(from_telegram_id) == str(to_telegram_id):
            raise ValidationError("자기 자신을 친구로 추가할 수 없습니다.")

        sender = await AccountService.provision_account(from_telegram_id)
        receiver = await AccountService.provision_account(to_telegram_id)

        existing = await friend_repo.find_edge_between(sender.id, receiver.id)
        if existing:
            if existing.status == FriendStatus.ACCEPTED:
                raise AlreadyFriendsError()
            if existing.status == FriendStatus.PENDING:
                raise FriendRequestExistsError()

            # 거절된 관계는 새 요청으로 다시 연다
            existing.user_id = sender.id
            existing.friend_id = receiver.id
            existing.status = FriendStatus.PENDING
            try:
                await existing.save()
            except IntegrityError:
                # 반대 방향 행이 이미 있음 (예전 방식의 양방향 저장)
                raise FriendRequestExistsError()
            logger.info(f"Friend request reopened: {sender.id} -> {receiver.id}")
            return existing

        try:
            request = await Friend.create(user=sender, friend=receiver, status=FriendStatus.PENDING)
        except IntegrityError:
            raise FriendRequestExistsError()

        logger.info(f"Friend request sent: {sender.id} -> {receiver.id}")
        return request

    @staticmethod
    async def accept_request(user_telegram_id: str, friend_telegram_id: str) -> Friend:
        """
        friend → user 방향의 대기 중 요청 수락

        역방향 행은 만들지 않습니다 (관계당 한 행).

        Raises:
            AccountNotFoundError: 계정 없음
            FriendRequestNotFoundError: 대기 중인 요청 없음
        """
        user = await AccountService.get_by_telegram_id(user_telegram_id)
        friend = await AccountService.get_by_telegram_id(friend_telegram_id)

        updated = await Friend.filter(
            user_id=friend.id,
            friend_id=user.id,
            status=FriendStatus.PENDING
        ).update(status=FriendStatus.ACCEPTED)

        if not updated:
            raise FriendRequestNotFoundError(friend.id, user.id)

        logger.info(f"Friend request accepted: {friend.id} -> {user.id}")
        return await Friend.get(user_id=friend.id, friend_id=user.id)

    @staticmethod
    async def reject_request(user_telegram_id: str, friend_telegram_id: str) -> None:
        """
        friend → user 방향의 대기 중 요청 거절

        Raises:
            AccountNotFoundError: 계정 없음
            FriendRequestNotFoundError: 대기 중인 요청 없음
        """
        user = await AccountService.get_by_telegram_id(user_telegram_id)
        friend = await AccountService.get_by_telegram_id(friend_telegram_id)

        updated = await Friend.filter(
            user_id=friend.id,
            friend_id=user.id,
            status=FriendStatus.PENDING
        ).update(status=FriendStatus.REJECTED)

        if not updated:
            raise FriendRequestNotFoundError(friend.id, user.id)

        logger.info(f"Friend request rejected: {friend.id} -> {user.id}")

    @staticmethod
    async def list_friends(user_id: int) -> List[User]:
        """수락된 친구 목록"""
        await AccountService.get_account(user_id)
        friend_ids = await friend_repo.get_accepted_friend_ids(user_id)
        return await User.filter(id__in=friend_ids).order_by("id")

    @staticmethod
    async def list_pending_requests(user_id: int) -> List[Friend]:
        """받은 친구 요청 (대기 중)"""
        return await friend_repo.get_pending_requests_for(user_id)

    @staticmethod
    async def count_friends(user_id: int) -> int:
        return await friend_repo.count_accepted_friends(user_id)
