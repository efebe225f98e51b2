"""
listup_law ユーティリティモジュール

models からも import されるため、ここでは models に依存しない
era のみを再エクスポートする。
"""

from .era import (
    Era,
    ERA_AD_OFFSET,
    ERA_BOUNDARIES,
    era_to_ad,
    ad_to_era,
)

__all__ = [
    'Era',
    'ERA_AD_OFFSET',
    'ERA_BOUNDARIES',
    'era_to_ad',
    'ad_to_era',
]
