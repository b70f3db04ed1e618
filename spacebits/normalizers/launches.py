from spacebits.errors import DeserializationError
from spacebits.schemas import (
    Launch,
    LaunchWeather,
    LaunchWindow,
    RawLaunch,
    RawLaunchFeed,
    UpcomingLaunchesSnapshot,
)
from .base import Normalizer, format_capture_time
from .types import CaptureTime, Raw

class UpcomingLaunchesNormalizer(Normalizer):
    """
    rocketlaunch.live flattens the launch window and weather into prefixed
    top-level keys (win_open, weather_temp, ...). The snapshot groups them.
    """
    def normalize(self, raw: Raw, captured_at: CaptureTime) -> UpcomingLaunchesSnapshot:
        if not isinstance(raw, RawLaunchFeed):
            raise DeserializationError(f"expected RawLaunchFeed, got {type(raw).__name__}")
        return UpcomingLaunchesSnapshot(
            valid=raw.valid,
            count=raw.count,
            limit=raw.limit,
            total=raw.total,
            last_page=raw.last_page,
            updated_date_time=format_capture_time(captured_at),
            launches=[to_launch(r) for r in raw.launches],
        )


def to_launch(r: RawLaunch) -> Launch:
    return Launch(
        id=r.id,
        cospar_id=r.cospar_id,
        sort_date=r.sort_date,
        name=r.name,
        slug=r.slug,
        provider=r.provider,
        vehicle=r.vehicle,
        pad=r.pad,
        missions=list(r.missions),
        mission_description=r.mission_description,
        launch_description=r.launch_description,
        date_str=r.date_str,
        window=LaunchWindow(opens=r.win_open, t0=r.t0, closes=r.win_close),
        tags=list(r.tags),
        weather=LaunchWeather(
            summary=r.weather_summary,
            temp=r.weather_temp,
            condition=r.weather_condition,
            wind_mph=r.weather_wind_mph,
            icon=r.weather_icon,
            updated=r.weather_updated,
        ),
        modified=r.modified,
    )
