from neighborhood_api.services.neighbors.activity_service import ActivityService
from neighborhood_api.services.neighbors.leaderboard_service import NeighborLeaderboardService
from neighborhood_api.services.neighbors.roster_service import RosterService

__all__ = ["ActivityService", "NeighborLeaderboardService", "RosterService"]
