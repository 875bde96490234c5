# config.py

# ===== Kinematics =====
WHEELBASE_M = 0.7             # effective axle separation H [m]

# ===== Motion limits (start values, adjustable at runtime) =====
DEFAULT_SPEED_LIMIT = 1.0     # m/s
DEFAULT_ANGLE_LIMIT = 20.0    # deg

# ===== Loop =====
LOOP_RATE_HZ = 50             # 0 = free-running

# ===== Keys =====
QUIT_KEY = "q"


# ===== Steering servo (PCA9685 ch 0) =====
STEERING_CHANNEL = 0
STEERING_INVERT = True
STEERING_DEAD_ZONE = 0.03
STEERING_GAIN = 1.0

SERVO_CENTER_US = 1600
SERVO_LEFT_US   = 950
SERVO_RIGHT_US  = 2200

MAX_STEER_DEG = 30.0          # mechanical steering angle at full servo travel


# ===== Throttle / ESC (PCA9685 ch 1) =====
THROTTLE_CHANNEL = 1
THROTTLE_INVERT = True
THROTTLE_DEAD_ZONE = 0.05

THROTTLE_NEUTRAL_US = 1600
THROTTLE_FORWARD_US = 1900
THROTTLE_REVERSE_US = 1100

MAX_SPEED_MPS = 2.0           # speed at full throttle


# ===== Output =====
DEFAULT_SINK = "console"      # console | pca9685 | none
CONSOLE_LOG_INTERVAL_S = 0.5

DISPLAY_ENABLED = False
