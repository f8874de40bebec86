"""Ambassador Earnings Simulator — referral network income projection and goal seeking."""

__version__ = "1.0.0"
