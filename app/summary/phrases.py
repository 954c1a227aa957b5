# ABOUTME: Template pools for surf summaries keyed by overall quality tier
# ABOUTME: Pure data; slots are filled with str.format by the summary generator

# Available slots: {swell_text} {swell_description} {wind_text} {wind_description}
# {tide_text} {recommendation}

SUMMARY_TEMPLATES = {
    "firing": [
        "🔥 FIRING! {swell_text}, {wind_text}, {tide_text}. This is IT - drop everything and surf NOW!",
        "🚨 BREAKING: Epic conditions! {swell_text} with {wind_text} and {tide_text}. All systems GO!",
        "⚡ NUCLEAR! {swell_text}, {wind_text}, {tide_text}. The stars have aligned - GO SURF!",
    ],
    "epic": [
        "⚡ Epic session brewing! {swell_text}, {wind_text}, {tide_text}. {recommendation}",
        "🏄 Premium conditions! {swell_description} with {wind_description} and {tide_text}. {recommendation}",
        "🔥 Solid surf alert! {swell_text}, {wind_text}, {tide_text}. {recommendation}",
    ],
    "good": [
        "👌 Quality waves ahead! {swell_text}, {wind_text}, {tide_text}. {recommendation}",
        "🌊 Nice conditions brewing! {swell_description} meets {wind_description} with {tide_text}. {recommendation}",
        "🤙 Solid session potential! {swell_text}, {wind_text}, {tide_text}. {recommendation}",
    ],
    "fair": [
        "🤷 Mixed bag today. {swell_text}, {wind_text}, {tide_text}. {recommendation}",
        "⚖️ So-so conditions. {swell_description} with {wind_description} and {tide_text}. {recommendation}",
        "🌪️ Challenging surf. {swell_text}, {wind_text}, {tide_text}. {recommendation}",
    ],
    "poor": [
        "😬 Rough conditions. {swell_text}, {wind_text}, {tide_text}. {recommendation}",
        "🌊 Messy surf today. {swell_description} with {wind_description} and {tide_text}. Better days ahead!",
        "📚 Study session weather. {swell_text}, {wind_text}, {tide_text}. Time to wax your board!",
    ],
    "terrible": [
        "💀 Gnarly out there! {swell_text}, {wind_text}, {tide_text}. Stay on the beach!",
        "⚠️ Danger zone! {wind_description} with {swell_description} and {tide_text}. Not surfable!",
        "🏠 Indoor day! {swell_text}, {wind_text}, {tide_text}. Surf movies and planning time!",
    ],
}

# Onshore wind wrecked it; tide doesn't matter so it isn't mentioned
WIND_OVERRIDE_TEMPLATES = {
    "terrible": [
        "💨 Blown out! {wind_text} is shredding {swell_text} into whitewash. Stay home.",
        "💨 Victory at sea. {wind_text} turns {swell_text} into a washing machine. Not happening.",
        "💨 Wind says no. {wind_text} and {swell_text} means a messy, unsurfable mess out there.",
        "💨 Maxed-out onshores! {wind_text} is wrecking {swell_text}. Go for a run instead.",
    ],
    "poor": [
        "😬 Wind's the problem. {swell_text} would be fun but {wind_text} is chopping it up.",
        "😬 Bumpy and crumbly. {wind_text} is taking the shape out of {swell_text}.",
        "😬 Onshore texture. {swell_text} under {wind_text} - only if you're desperate.",
        "😬 Blown-out-ish. {wind_text} on {swell_text}. Check back when the wind backs off.",
    ],
}

PERFECT_TIMING_PHRASES = [
    "Perfect timing - conditions are dialed!",
    "Stellar timing - everything aligned!",
    "Money timing - window is open!",
    "Prime conditions - go time!",
    "Perfect window - conditions are firing!",
]

MONITOR_TIDE = "Monitor tide changes for optimal timing."
CHECK_TIDE = "Check tide timing for optimal conditions."
CONSIDER_WAITING = "Consider waiting - tide turns at {time} (in {duration})."
TIDE_RISING = "Tide rising (turns at {time}) - better surf after the turn."

PREDICTION_PENDING_SUFFIX = " 🤖 ML model is still crunching the numbers..."

# (min ML score, commentary), best first
PREDICTION_COMMENTARY = [
    (7.0, "the model is stoked"),
    (4.0, "the model says it's worth a look"),
    (0.0, "the model agrees, skip it"),
]
PREDICTION_RESOLVED_SUFFIX = " 🤖 ML score: {score:.1f}/10, {commentary}."
