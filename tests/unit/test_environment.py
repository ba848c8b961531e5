"""
Unit tests for the Gymnasium environment wrapper.
"""
import pytest
import numpy as np
from game import BoardConfig, MinesweeperEnv, fixed_generator


@pytest.fixture
def env() -> MinesweeperEnv:
    """Seeded 10x10 environment."""
    return MinesweeperEnv(seed=5)


@pytest.fixture
def wall_env() -> MinesweeperEnv:
    """5x5 environment with a wall of mines down column 2."""
    env = MinesweeperEnv(BoardConfig(5, 5, 5), render_mode="ansi")
    env.session.generator = fixed_generator([(2, y) for y in range(5)])
    return env


def reveal_action(env: MinesweeperEnv, x: int, y: int) -> int:
    return y * env.config.width + x


def flag_action(env: MinesweeperEnv, x: int, y: int) -> int:
    return env.config.width * env.config.height + reveal_action(env, x, y)


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_covers_reveal_and_flag(self, env) -> None:
        """Two actions per cell."""
        assert env.action_space.n == 200

    def test_reset_observation(self, env) -> None:
        """Reset returns an all-closed observation inside the space."""
        obs, info = env.reset()
        assert obs.shape == (10, 10)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "PLAYING"
        assert info["remaining_mines"] == 10


class TestStep:
    """Test stepping the environment."""

    def test_safe_reveal_rewards_one(self, wall_env) -> None:
        """Opening safe cells is rewarded."""
        wall_env.reset()
        obs, reward, terminated, truncated, info = wall_env.step(
            reveal_action(wall_env, 0, 0)
        )
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert info["revealed"] == 10
        assert obs[0, 0] == 0

    def test_mine_reveal_terminates(self, wall_env) -> None:
        """Hitting a mine ends the episode with a penalty."""
        wall_env.reset()
        wall_env.step(reveal_action(wall_env, 0, 0))
        obs, reward, terminated, _, info = wall_env.step(
            reveal_action(wall_env, 2, 3)
        )
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert obs[3, 2] == 9

    def test_flag_win(self, wall_env) -> None:
        """Flagging every mine wins the episode."""
        wall_env.reset()
        wall_env.step(reveal_action(wall_env, 0, 0))
        rewards = [
            wall_env.step(flag_action(wall_env, 2, y))[1] for y in range(5)
        ]
        assert rewards == [0.0, 0.0, 0.0, 0.0, 10.0]
        assert wall_env.session.win is True

    def test_ignored_action_is_penalized(self, wall_env) -> None:
        """Revealing an opened cell does nothing and costs a little."""
        wall_env.reset()
        wall_env.step(reveal_action(wall_env, 0, 0))
        _, reward, _, _, _ = wall_env.step(reveal_action(wall_env, 0, 0))
        assert reward == pytest.approx(-0.1)

    def test_reset_starts_new_game(self, wall_env) -> None:
        """Reset after a loss gives a fresh board."""
        wall_env.reset()
        wall_env.step(reveal_action(wall_env, 0, 0))
        wall_env.step(reveal_action(wall_env, 2, 0))
        obs, info = wall_env.reset()
        assert np.all(obs == -1)
        assert info["steps"] == 0


class TestActionMask:
    """Test the valid action mask."""

    def test_new_game_all_actions_valid(self, env) -> None:
        """Every reveal and flag is valid at the start."""
        env.reset()
        assert env.get_action_mask().all()

    def test_flagged_cell_can_only_be_unflagged(self, wall_env) -> None:
        """A flagged cell accepts a flag but not a reveal."""
        wall_env.reset()
        wall_env.step(flag_action(wall_env, 4, 4))
        mask = wall_env.get_action_mask()
        assert not mask[reveal_action(wall_env, 4, 4)]
        assert mask[flag_action(wall_env, 4, 4)]

    def test_opened_cells_masked(self, wall_env) -> None:
        """Opened cells accept neither action."""
        wall_env.reset()
        wall_env.step(reveal_action(wall_env, 0, 0))
        mask = wall_env.get_action_mask()
        assert not mask[reveal_action(wall_env, 1, 1)]
        assert not mask[flag_action(wall_env, 1, 1)]

    def test_finished_game_masks_everything(self, wall_env) -> None:
        """Nothing is valid once the game is lost."""
        wall_env.reset()
        wall_env.step(reveal_action(wall_env, 0, 0))
        wall_env.step(reveal_action(wall_env, 2, 0))
        assert not wall_env.get_action_mask().any()


class TestSeeding:
    """Test reproducible mine placement."""

    def test_same_seed_same_layout(self) -> None:
        """Seeded resets produce identical boards."""
        first = MinesweeperEnv(seed=11)
        second = MinesweeperEnv(seed=99)
        first.reset(seed=3)
        second.reset(seed=3)
        first.step(55)
        second.step(55)
        assert np.array_equal(
            first.session.board.get_observation(),
            second.session.board.get_observation(),
        )


class TestRender:
    """Test text rendering through the environment."""

    def test_ansi_render_returns_text(self, wall_env) -> None:
        """ansi mode returns the HUD and board."""
        wall_env.reset()
        text = wall_env.render()
        assert "Mines: 5" in text
        assert text.splitlines()[-1] == ". . . . ."

    def test_no_render_mode_returns_none(self, env) -> None:
        """Without a render mode nothing is produced."""
        env.reset()
        assert env.render() is None
