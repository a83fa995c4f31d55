"""
Webapp Configuration

Settings and display constants for the MIMIC-III Clinical Dashboard.
"""

# App metadata
APP_TITLE = "MIMIC-III Clinical Dashboard"
APP_VERSION = "0.1.0"

# Layout settings
LAYOUT = "wide"
INITIAL_SIDEBAR_STATE = "expanded"

# Page configuration
PAGE_TITLE = "MIMIC-III Dashboard"
PAGE_ICON = "🏥"


# Cache settings
CACHE_TTL_SECONDS = 3600  # 1 hour

# Tabs (value -> button label)
TAB_LABELS = {
    'overview': 'Overview',
    'patient': 'Patient Vitals',
    'medications': 'Medications',
}

# Visibility checkboxes (chart name -> label)
CHART_LABELS = {
    'outcomes': 'Patient Outcomes',
    'diagnoses': 'Diagnoses',
    'stayDuration': 'Length of Stay',
    'vitalSigns': 'Vital Signs',
    'medications': 'Medications',
}

TIME_RANGE_LABELS = {
    '6h': 'Last 6 Hours',
    '12h': 'Last 12 Hours',
    '24h': 'Last 24 Hours',
}

# Chart heights (px)
CHART_HEIGHT = 300
FULL_WIDTH_CHART_HEIGHT = 400

# Color schemes
PIE_COLORS = ['#0088FE', '#00C49F', '#FFBB28', '#FF8042', '#8884d8', '#82ca9d', '#ffc658']

OUTCOME_COLORS = {
    'survived': '#82ca9d',
    'deceased': '#ff7f7f',
}

VITAL_SERIES = {
    # column -> (legend name, colour)
    'heartRate': ('Heart Rate', '#ff7f7f'),
    'o2Saturation': ('O₂ Saturation', '#82ca9d'),
    'bloodPressure': ('Blood Pressure', '#8884d8'),
    'glucose': ('Glucose', '#ffc658'),
}

MEDICATION_SERIES = {
    'antibiotics': ('Antibiotics', '#8884d8'),
    'vasopressors': ('Vasopressors', '#82ca9d'),
    'analgesics': ('Analgesics', '#ffc658'),
    'sedatives': ('Sedatives', '#ff7f7f'),
}

PRIMARY_COLOR = '#8884d8'

# Opacity of pie slices other than the selected one
UNSELECTED_OPACITY = 0.5

# Simulated doses per day of ICU stay (no source file exists for this chart)
MEDICATION_USAGE_SIMULATED = [
    {'day': 1, 'antibiotics': 240, 'vasopressors': 120, 'analgesics': 180, 'sedatives': 90},
    {'day': 2, 'antibiotics': 230, 'vasopressors': 110, 'analgesics': 200, 'sedatives': 80},
    {'day': 3, 'antibiotics': 220, 'vasopressors': 90, 'analgesics': 190, 'sedatives': 85},
    {'day': 4, 'antibiotics': 210, 'vasopressors': 80, 'analgesics': 170, 'sedatives': 75},
    {'day': 5, 'antibiotics': 190, 'vasopressors': 70, 'analgesics': 160, 'sedatives': 65},
    {'day': 6, 'antibiotics': 180, 'vasopressors': 60, 'analgesics': 150, 'sedatives': 60},
    {'day': 7, 'antibiotics': 170, 'vasopressors': 50, 'analgesics': 140, 'sedatives': 50},
]
