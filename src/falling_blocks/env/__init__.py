"""Gymnasium environments for Falling Blocks."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register the single-action environment (5 discrete actions)
register(
    id="FallingBlocks-20x10-v0",
    entry_point="falling_blocks.env.falling_block_env:FallingBlockEnv",
)
