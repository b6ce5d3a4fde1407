import pytest

from graveyard.ingestion.exceptions import MissingFieldError, NoDamageHistoryError
from graveyard.ingestion.field_policy import get_field_policy
from graveyard.ingestion.run_stats import extract_last_run_stats


class TestExtractLastRunStats:
    def test_reads_all_metrics(self, make_run) -> None:
        run = make_run(
            counters={
                "LevelAchieved": 12,
                "EnemiesDefeated": 50,
                "RegularEnemiesDefeated": 40,
                "EliteEnemiesDefeated": 8,
                "BossEnemiesDefeated": 2,
                "SoulStonesCollected": 6,
            },
            aggregators={"GoldGained": 1500, "DamageDealt": 88000.5, "RunTime": 300},
        )

        stats = extract_last_run_stats([run])

        assert stats.level == 12
        assert stats.damage_taken == 999
        assert stats.kills == 50
        assert stats.regular_kills == 40
        assert stats.elite_kills == 8
        assert stats.boss_kills == 2
        assert stats.soulstones == 6
        assert stats.gold == 1500
        assert stats.damage_dealt == 88000.5
        assert stats.duration == 300

    def test_uses_only_the_last_run(self, make_run) -> None:
        first = make_run(counters={"LevelAchieved": 40, "EnemiesDefeated": 900})
        last = make_run(counters={"LevelAchieved": 3, "EnemiesDefeated": 1})

        stats = extract_last_run_stats([first, last])

        assert stats.level == 3
        assert stats.kills == 1

    def test_optional_fields_default_to_zero(self, make_run) -> None:
        run = make_run(counters={"LevelAchieved": 7}, aggregators={"RunTime": 60})

        stats = extract_last_run_stats([run])

        assert stats.kills == 0
        assert stats.gold == 0
        assert stats.damage_dealt == 0
        assert stats.soulstones == 0

    def test_zero_level_is_clamped_to_one(self, make_run) -> None:
        run = make_run(counters={"LevelAchieved": 0})
        assert extract_last_run_stats([run]).level == 1

    def test_missing_level_raises(self, make_run) -> None:
        run = make_run(counters={"EnemiesDefeated": 5})
        with pytest.raises(MissingFieldError) as exc_info:
            extract_last_run_stats([run])
        assert exc_info.value.field == "LevelAchieved"

    def test_missing_run_time_raises_instead_of_defaulting(self, make_run) -> None:
        run = make_run(aggregators={"GoldGained": 10})
        with pytest.raises(MissingFieldError) as exc_info:
            extract_last_run_stats([run])
        assert exc_info.value.field == "RunTime"

    def test_missing_aggregator_block_raises_for_run_time(self, make_run) -> None:
        run = make_run()
        del run["_statAggregators"]
        with pytest.raises(MissingFieldError, match="RunTime"):
            extract_last_run_stats([run])

    @pytest.mark.parametrize("damage", [[], "none"])
    def test_no_damage_history(self, make_run, damage: object) -> None:
        run = make_run(damage=damage)
        with pytest.raises(NoDamageHistoryError):
            extract_last_run_stats([run])

    def test_absent_damage_history(self, make_run) -> None:
        run = make_run()
        del run["_lastDamageInstances"]
        with pytest.raises(NoDamageHistoryError):
            extract_last_run_stats([run])

    def test_final_damage_instance_without_total(self, make_run) -> None:
        run = make_run(damage=[{"_totalDamage": 5}, {"_source": "fall"}])
        with pytest.raises(MissingFieldError) as exc_info:
            extract_last_run_stats([run])
        assert exc_info.value.field == "_totalDamage"

    def test_legacy_policy_defaults_required_fields(self, make_run) -> None:
        run = make_run(counters={}, aggregators={})

        stats = extract_last_run_stats([run], get_field_policy("v1"))

        assert stats.level == 1
        assert stats.duration == 0
        assert stats.damage_taken == 999
