from ride_share.app.protocols import PricingPolicy
from ride_share.config.models import PricingModel, PricingPolicyPerMileModel, PricingPolicyUnion
from ride_share.domain.entities.ride import RideKind
from ride_share.policy.pricing import PerMilePricingPolicy


def make_pricing_policy(cfg: PricingPolicyUnion) -> PricingPolicy:
    if isinstance(cfg, PricingPolicyPerMileModel):
        pp = PerMilePricingPolicy(rate_per_mile=cfg.rate_per_mile, minimum_fare=cfg.minimum_fare)
        return pp
    else:
        raise TypeError(cfg)


def make_pricing_policies(cfg: PricingModel) -> dict[RideKind, PricingPolicy]:
    return {
        RideKind.STANDARD: make_pricing_policy(cfg.standard),
        RideKind.PREMIUM: make_pricing_policy(cfg.premium),
    }
