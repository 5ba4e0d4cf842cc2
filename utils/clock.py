"""
시계 유틸리티

일일 보너스의 날짜 경계 계산과 테스트용 시간 고정에 사용합니다.
저장은 항상 UTC, 날짜 경계는 서버 로컬 시간대 기준입니다.
"""
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Tuple


class Clock:
    """현재 시각 제공자 (tz=None이면 서버 로컬 시간대)"""

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def to_local(self, moment: datetime) -> datetime:
        """aware datetime으로 바꾼 뒤 기준 시간대로 변환 (naive는 UTC로 간주)"""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(self.tz)

    def day_bounds(self, moment: Optional[datetime] = None) -> Tuple[datetime, datetime]:
        """
        moment가 속한 달력 날짜의 [시작, 다음날 시작) 범위

        Returns:
            (day_start, next_day_start) - 둘 다 aware datetime
        """
        day = self.to_local(moment or self.now()).date()
        return self._midnight(day), self._midnight(day + timedelta(days=1))

    def _midnight(self, day: date) -> datetime:
        """해당 날짜 00:00 (그 날짜의 UTC 오프셋 적용, DST 전환일 포함)"""
        if self.tz is None:
            return datetime.combine(day, time.min).astimezone()
        return datetime.combine(day, time.min, tzinfo=self.tz)

    def is_same_day(self, moment: datetime, reference: Optional[datetime] = None) -> bool:
        start, end = self.day_bounds(reference)
        return start <= self.to_local(moment) < end


class FixedClock(Clock):
    """고정 시각 시계 (테스트/스크립트용)"""

    def __init__(self, moment: datetime, tz: Optional[tzinfo] = None):
        super().__init__(tz)
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, **kwargs) -> None:
        self.moment = self.moment + timedelta(**kwargs)


SYSTEM_CLOCK = Clock()
