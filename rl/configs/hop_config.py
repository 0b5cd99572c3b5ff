"""
Configuration for the Bunny Hop game and the agents trained on it
"""

# Game parameters (HopGame keyword arguments)
GAME_CONFIG = {
    "width": 480,
    "height": 640,
    "spawn_interval": 60,  # ticks between items
    "base_speed": 3.0,  # px per tick at score 0
    "player_speed": 5.0,
    "player_size": 32.0,
    "item_size": 32.0,
    "player_margin": 40.0,
}

# Environment parameters (HopEnv keyword arguments, game ones included)
ENV_CONFIG = {
    # "render_mode": None,  # rendering is far too slow for training
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_items": 4,
    **GAME_CONFIG,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "R_COLLECT": 1.0,    # Reward for every carrot caught
    "R_TIME": 0.001,     # Small bonus per tick survived
    "R_DEATH": 5.0,      # Penalty when a rock ends the run
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}
