"""Hand-written day titles for the four flagship 30-day programs, keyed by slug."""

from __future__ import annotations


WORKOUT_TITLES: dict[str, list[str]] = {
    "30-day-beginner-men": [
        "Day 1: Full Body Strength Basics",
        "Day 2: Chest & Arms Foundation",
        "Day 3: Core & Stability Training",
        "Day 4: Leg Power & Endurance",
        "Day 5: Upper Body Sculpt",
        "Day 6: Fat Burn Circuit",
        "Day 7: Strength & Recovery",
        "Day 8: Push-up Challenge",
        "Day 9: Arm Definition Workout",
        "Day 10: Core Power Session",
        "Day 11: Full Body Burn",
        "Day 12: Chest Expansion",
        "Day 13: Arm Strength Builder",
        "Day 14: Metabolic Boost",
        "Day 15: Strength Progress Check",
        "Day 16: Advanced Push-ups",
        "Day 17: Bicep & Tricep Focus",
        "Day 18: Core Strength Max",
        "Day 19: Leg Day Intensity",
        "Day 20: Upper Body Power",
        "Day 21: Fat Burning HIIT",
        "Day 22: Chest Definition",
        "Day 23: Arm Sculpting",
        "Day 24: Full Body Challenge",
        "Day 25: Strength Endurance",
        "Day 26: Power Push Day",
        "Day 27: Arm & Shoulder Focus",
        "Day 28: Core Finale",
        "Day 29: Full Body Max Out",
        "Day 30: 30-Day Celebration & Results",
    ],
    "30-day-beginner-women": [
        "Day 1: Gentle Start & Toning Basics",
        "Day 2: Belly Fat Focus",
        "Day 3: Arm Toning Session",
        "Day 4: Glute & Leg Sculpt",
        "Day 5: Full Body Tone",
        "Day 6: Core Strength for Women",
        "Day 7: Active Recovery & Stretch",
        "Day 8: Belly Fat Burner",
        "Day 9: Arm Definition Workout",
        "Day 10: Curves & Shape Focus",
        "Day 11: Total Body Tone",
        "Day 12: Lower Belly Focus",
        "Day 13: Arm & Back Toning",
        "Day 14: Glute Activation",
        "Day 15: Progress Check & Motivation",
        "Day 16: Advanced Belly Fat Burn",
        "Day 17: Sleek Arm Sculpt",
        "Day 18: Leg & Glute Definition",
        "Day 19: Full Body Burn",
        "Day 20: Core & Posture",
        "Day 21: Toning HIIT",
        "Day 22: Waistline Focus",
        "Day 23: Arm Strength & Tone",
        "Day 24: Booty Building",
        "Day 25: Total Body Sculpt",
        "Day 26: Belly Fat Finale",
        "Day 27: Arm Definition Max",
        "Day 28: Curves & Shape Final",
        "Day 29: Full Body Transformation",
        "Day 30: 30-Day Results Celebration",
    ],
    "30-day-dumbbell-men": [
        "Day 1: Dumbbell Strength Basics",
        "Day 2: Chest Press Variations",
        "Day 3: Bicep & Tricep Focus",
        "Day 4: Shoulder Power",
        "Day 5: Back Strength Builder",
        "Day 6: Full Body Dumbbell",
        "Day 7: Active Recovery",
        "Day 8: Progressive Overload",
        "Day 9: Arm Mass Building",
        "Day 10: Chest Expansion",
        "Day 11: Shoulder Definition",
        "Day 12: Back Width & Thickness",
        "Day 13: Arm Strength Max",
        "Day 14: Full Body Power",
        "Day 15: Strength Assessment",
        "Day 16: Advanced Chest Work",
        "Day 17: Arm Size & Strength",
        "Day 18: Shoulder Cap Building",
        "Day 19: Back Development",
        "Day 20: Full Body Strength",
        "Day 21: Chest & Arm Superset",
        "Day 22: Shoulder & Back Focus",
        "Day 23: Arm Definition Peak",
        "Day 24: Full Body Mass",
        "Day 25: Strength Endurance",
        "Day 26: Power Building",
        "Day 27: Final Strength Push",
        "Day 28: Muscle Definition",
        "Day 29: Strength Finale",
        "Day 30: 30-Day Strength Results",
    ],
    "30-day-dumbbell-women": [
        "Day 1: Dumbbell Toning Basics",
        "Day 2: Arm Sculpt with Weights",
        "Day 3: Glute & Leg Toning",
        "Day 4: Full Body Dumbbell Tone",
        "Day 5: Back & Posture Focus",
        "Day 6: Metabolic Boost",
        "Day 7: Recovery & Mobility",
        "Day 8: Progressive Toning",
        "Day 9: Arm Definition Work",
        "Day 10: Leg Sculpting",
        "Day 11: Full Body Burn",
        "Day 12: Shoulder & Back Tone",
        "Day 13: Arm Strength & Shape",
        "Day 14: Glute Activation",
        "Day 15: Toning Progress Check",
        "Day 16: Advanced Arm Sculpt",
        "Day 17: Leg Definition Max",
        "Day 18: Full Body Definition",
        "Day 19: Metabolic Conditioning",
        "Day 20: Total Body Tone",
        "Day 21: Arm & Shoulder Focus",
        "Day 22: Leg & Glute Final",
        "Day 23: Full Body Sculpt",
        "Day 24: Strength & Tone Combo",
        "Day 25: Metabolic Finale",
        "Day 26: Definition Max",
        "Day 27: Total Body Transformation",
        "Day 28: Final Toning Push",
        "Day 29: Results Preview",
        "Day 30: 30-Day Celebration",
    ],
}
