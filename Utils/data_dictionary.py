YES_NO = {"yes": "Yes", "no": "No"}

EDUCATION_VALUES = {
    0: "None",
    1: "Primary (4th grade)",
    2: "Middle School (5th-9th)",
    3: "Secondary",
    4: "Higher Education",
}

JOB_VALUES = {
    "teacher":  "Teacher",
    "health":   "Health care",
    "services": "Civil services",
    "at_home":  "At home",
    "other":    "Other",
}


DATA_DICTIONARY: dict[str, dict] = {
    # ── Demographic ──
    "school":   {"label": "School", "description": "Student's school",
                 "values": {"GP": "Gabriel Pereira", "MS": "Mousinho da Silveira"}},
    "sex":      {"label": "Sex", "description": "Student's sex",
                 "values": {"M": "Male", "F": "Female"}},
    "age":      {"label": "Age", "description": "Student's age (15-22)", "type": "numeric"},
    "address":  {"label": "Home Address", "description": "Home address type",
                 "values": {"U": "Urban", "R": "Rural"}},
    "famsize":  {"label": "Family Size", "description": "Family size",
                 "values": {"LE3": "≤3 members", "GT3": ">3 members"}},
    "Pstatus":  {"label": "Parent Status", "description": "Parent's cohabitation status",
                 "values": {"T": "Living together", "A": "Apart"}},

    # ── Family education and jobs ──
    "Medu":     {"label": "Mother's Education", "description": "Mother's education level",
                 "values": EDUCATION_VALUES},
    "Fedu":     {"label": "Father's Education", "description": "Father's education level",
                 "values": EDUCATION_VALUES},
    "Mjob":     {"label": "Mother's Job", "description": "Mother's job", "values": JOB_VALUES},
    "Fjob":     {"label": "Father's Job", "description": "Father's job", "values": JOB_VALUES},

    # ── School-related ──
    "reason":   {"label": "School Choice Reason", "description": "Reason to choose this school",
                 "values": {"home": "Close to home", "reputation": "School reputation",
                            "course": "Course preference", "other": "Other"}},
    "guardian": {"label": "Guardian", "description": "Student's guardian",
                 "values": {"mother": "Mother", "father": "Father", "other": "Other"}},
    "traveltime": {"label": "Travel Time", "description": "Home to school travel time",
                   "values": {1: "<15 min", 2: "15-30 min", 3: "30 min - 1 hour", 4: ">1 hour"}},
    "studytime":  {"label": "Study Time", "description": "Weekly study time",
                   "values": {1: "<2 hours", 2: "2-5 hours", 3: "5-10 hours", 4: ">10 hours"}},
    "failures":   {"label": "Past Failures", "description": "Number of past class failures",
                   "type": "numeric", "note": "n if 1≤n<3, else 3"},

    # ── Support ──
    "schoolsup":  {"label": "School Support", "description": "Extra educational support from school",
                   "values": YES_NO},
    "famsup":     {"label": "Family Support", "description": "Family educational support",
                   "values": YES_NO},
    "paid":       {"label": "Paid Classes", "description": "Extra paid classes within the course subject",
                   "values": YES_NO},
    "activities": {"label": "Extra Activities", "description": "Extra-curricular activities",
                   "values": YES_NO},
    "nursery":    {"label": "Nursery", "description": "Attended nursery school", "values": YES_NO},
    "higher":     {"label": "Higher Education Goal", "description": "Wants to take higher education",
                   "values": YES_NO},
    "internet":   {"label": "Internet Access", "description": "Internet access at home", "values": YES_NO},
    "romantic":   {"label": "Romantic Relationship", "description": "In a romantic relationship",
                   "values": YES_NO},

    # ── Lifestyle (1-5 scales) ──
    "famrel":   {"label": "Family Relationship", "description": "Quality of family relationships",
                 "scale": "1 = very bad, 5 = excellent"},
    "freetime": {"label": "Free Time", "description": "Free time after school",
                 "scale": "1 = very low, 5 = very high"},
    "goout":    {"label": "Going Out", "description": "Going out with friends",
                 "scale": "1 = very low, 5 = very high"},
    "Dalc":     {"label": "Weekday Alcohol", "description": "Workday alcohol consumption",
                 "scale": "1 = very low, 5 = very high"},
    "Walc":     {"label": "Weekend Alcohol", "description": "Weekend alcohol consumption",
                 "scale": "1 = very low, 5 = very high"},
    "health":   {"label": "Health Status", "description": "Current health status",
                 "scale": "1 = very bad, 5 = very good"},
    "absences": {"label": "Absences", "description": "Number of school absences",
                 "type": "numeric", "note": "0-93"},

    # ── Grades ──
    "G1": {"label": "First Period Grade", "description": "First period grade", "type": "numeric", "note": "0-20"},
    "G2": {"label": "Second Period Grade", "description": "Second period grade", "type": "numeric", "note": "0-20"},
    "G3": {"label": "Final Grade", "description": "Final grade (target variable)", "type": "numeric", "note": "0-20"},
}


# Short labels used on chart axes
EDUCATION_LABELS = {0: "None", 1: "Primary", 2: "Middle School", 3: "Secondary", 4: "Higher Education"}
STUDYTIME_LABELS = {1: "<2 hrs", 2: "2-5 hrs", 3: "5-10 hrs", 4: ">10 hrs"}
SCALE_LABELS     = {1: "Very Low", 2: "Low", 3: "Moderate", 4: "High", 5: "Very High"}


def get_label(field: str) -> str:
    """Human-readable label, or the field name itself when unknown."""
    return DATA_DICTIONARY.get(field, {}).get("label", field)


def get_value_label(field: str, value: object) -> str:
    """
    Human-readable label for one value of a field.
    Booleans are looked up as "yes"/"no"; unknown values fall back to str(value).
    """
    values = DATA_DICTIONARY.get(field, {}).get("values")
    if not values:
        return str(value)
    if isinstance(value, bool):
        value = "yes" if value else "no"
    return values.get(value, str(value))
