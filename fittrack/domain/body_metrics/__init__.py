"""Body metrics domain: BMI and daily calorie needs."""
