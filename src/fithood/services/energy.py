"""Energy balance math: BMR, TDEE, deficits, and goal projections.

Sign convention: a balance is ``calories_in - calories_out``. Negative values
are a caloric deficit (weight loss direction), positive values a surplus.
"""

from collections.abc import Iterable

from fithood.domain.entries import UserProfile
from fithood.domain.stats import (
    CALORIES_PER_KG,
    DailySummary,
    EnergyBalance,
    PeriodDeficit,
)

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "veryActive": 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55
DEFAULT_WEEKLY_GOAL_KG = 0.5

BMI_UNDERWEIGHT = 18.5
BMI_NORMAL = 25
BMI_OVERWEIGHT = 30


def calculate_bmr(weight: float, profile: UserProfile) -> float:
    """Return the Mifflin-St Jeor basal metabolic rate, or 0 without a weight."""
    if weight <= 0:
        return 0
    base = 10 * weight + 6.25 * profile.height - 5 * profile.age
    if profile.gender == "male":
        return base + 5
    return base - 161


def activity_multiplier(activity_level: str) -> float:
    """Return the TDEE multiplier for an activity level."""
    return ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)


def calculate_tdee(bmr: float, activity_level: str) -> float:
    """Return total daily energy expenditure."""
    return bmr * activity_multiplier(activity_level)


def daily_deficit(calories_in: float, tdee: float, calories_burned: float) -> float:
    """Return one day's balance; workout burn is on top of TDEE."""
    return calories_in - (tdee + calories_burned)


def calculate_period_deficit(
    days: Iterable[DailySummary], tdee: float
) -> PeriodDeficit:
    """Sum daily balances over days with logged calories.

    Days without any food are dropped from both the sum and the day count;
    counting them would book a full day of TDEE as deficit for a day that was
    simply not recorded.
    """
    logged = [day for day in days if day.total_calories != 0]
    total_calories = sum(day.total_calories for day in logged)
    calories_burned = sum(day.calories_burned for day in logged)
    if tdee <= 0 or not logged:
        return PeriodDeficit(
            total_deficit=0,
            days_logged=len(logged),
            avg_daily_deficit=0,
            total_calories=total_calories,
            calories_burned=calories_burned,
        )
    total = sum(
        daily_deficit(day.total_calories, tdee, day.calories_burned) for day in logged
    )
    return PeriodDeficit(
        total_deficit=total,
        days_logged=len(logged),
        avg_daily_deficit=total / len(logged),
        total_calories=total_calories,
        calories_burned=calories_burned,
    )


def weekly_weight_change(total_deficit: float, days: int) -> float:
    """Project kg gained per week (negative means loss)."""
    if days <= 0:
        return 0
    return (total_deficit / days) * 7 / CALORIES_PER_KG


def is_gaining(profile: UserProfile, current_weight: float) -> bool:
    """Return True when the goal weight is above the current weight."""
    return profile.goal_weight is not None and profile.goal_weight > current_weight


def target_calories(tdee: float, profile: UserProfile, current_weight: float) -> float:
    """Return daily intake that hits the profile's weekly goal rate."""
    weekly_goal = profile.weekly_goal or DEFAULT_WEEKLY_GOAL_KG
    daily_adjustment = weekly_goal * CALORIES_PER_KG / 7
    if is_gaining(profile, current_weight):
        return tdee + daily_adjustment
    return tdee - daily_adjustment


def weeks_to_goal(
    current_weight: float, goal_weight: float | None, weekly_change: float
) -> float | None:
    """Return weeks until the goal weight at the current rate.

    None when no goal is set or the weight is not moving.
    """
    if goal_weight is None or weekly_change == 0:
        return None
    return abs(current_weight - goal_weight) / abs(weekly_change)


def calculate_bmi(weight: float, height_cm: float) -> float:
    """Return body-mass index, or 0 when inputs are missing."""
    if weight <= 0 or height_cm <= 0:
        return 0
    height_m = height_cm / 100
    return weight / (height_m * height_m)


def bmi_category(bmi: float) -> str:
    """Return the WHO label for a BMI value."""
    if bmi < BMI_UNDERWEIGHT:
        return "Underweight"
    if bmi < BMI_NORMAL:
        return "Normal"
    if bmi < BMI_OVERWEIGHT:
        return "Overweight"
    return "Obese"


def calculate_energy_balance(
    current_weight: float,
    profile: UserProfile,
    avg_daily_calories: float,
    avg_daily_burned: float,
) -> EnergyBalance:
    """Combine BMR, TDEE, and goal projections for the current averages."""
    bmr = calculate_bmr(current_weight, profile)
    tdee = calculate_tdee(bmr, profile.activity_level)
    balance = daily_deficit(avg_daily_calories, tdee, avg_daily_burned) if tdee else 0
    weekly_change = balance * 7 / CALORIES_PER_KG
    bmi = calculate_bmi(current_weight, profile.height)
    return EnergyBalance(
        bmr=bmr,
        tdee=tdee,
        bmi=bmi,
        bmi_category=bmi_category(bmi) if bmi else "",
        target_calories=target_calories(tdee, profile, current_weight) if tdee else 0,
        daily_balance=balance,
        weekly_change_kg=weekly_change,
        weeks_to_goal=weeks_to_goal(current_weight, profile.goal_weight, weekly_change),
    )
