"""Static trip definition: the Rome port call from Civitavecchia."""

from .models import Activity, Coordinate, Pronunciation, Waypoint

PORT_ARRIVAL_TIME = "07:00"
SHIP_ONBOARD_TIME = "18:30"

CIVITAVECCHIA_PORT = Coordinate(lat=42.0930, lon=11.7880)
CIVITAVECCHIA_STATION = Coordinate(lat=42.0893, lon=11.7923)
ROMA_TERMINI = Coordinate(lat=41.9010, lon=12.5018)


def initial_itinerary() -> list[Activity]:
    """A fresh copy of the day's plan; completion flags start cleared"""
    return [
        Activity(
            id="disembark",
            title="Disembark",
            start_time="07:00",
            end_time="07:30",
            location_name="Civitavecchia cruise terminal",
            coords=CIVITAVECCHIA_PORT,
            description="Leave the ship with passport and cruise card.\nFree port shuttle to Largo della Pace.",
            key_details="Cruise card + ID. Note the all-aboard time: 18:30.",
            type="logistics",
        ),
        Activity(
            id="station",
            title="Walk to the station",
            start_time="07:30",
            end_time="08:00",
            location_name="Largo della Pace",
            end_location_name="Civitavecchia station",
            coords=CIVITAVECCHIA_STATION,
            description="Seafront walk to the station. Buy the BIRG day ticket at the tabacchi or the machine.",
            key_details="BIRG Lazio, zone 3: train, metro and buses all day.",
            price_eur=12,
            type="transport",
            google_maps_url="https://maps.google.com/?q=Stazione+Civitavecchia",
        ),
        Activity(
            id="train-in",
            title="Regional train to Rome",
            start_time="08:10",
            end_time="09:25",
            location_name="Civitavecchia station",
            end_location_name="Roma Termini",
            coords=ROMA_TERMINI,
            end_coords=ROMA_TERMINI,
            description="Regionale towards Roma Termini. Validate the BIRG ticket before boarding.",
            key_details="Sit on the left for sea views until Ladispoli.",
            type="transport",
            contingency_note="If the train is cancelled take the next one (every 30 min) and skip the Pantheon.",
        ),
        Activity(
            id="colosseum",
            title="Colosseum",
            start_time="09:45",
            end_time="11:15",
            location_name="Piazza del Colosseo",
            coords=Coordinate(lat=41.8902, lon=12.4922),
            description="Metro B from Termini to Colosseo (2 stops). Timed entry, arena floor included.",
            key_details="Entry slot 10:00. Bring the QR code offline.",
            price_eur=18,
            notes="CRITICAL",
            image_url="https://upload.wikimedia.org/wikipedia/commons/d/de/Colosseo_2020.jpg",
            audio_guide_text=(
                "Bienvenidos al Coliseo, el anfiteatro Flavio. Inaugurado en el año 80 "
                "por el emperador Tito, podía acoger a más de cincuenta mil espectadores."
            ),
        ),
        Activity(
            id="forum",
            title="Roman Forum and Palatine",
            start_time="11:15",
            end_time="12:30",
            location_name="Via della Salara Vecchia",
            coords=Coordinate(lat=41.8925, lon=12.4853),
            description="Same ticket as the Colosseum. Exit towards Via dei Fori Imperiali.",
            key_details="Little shade: water and hat.",
            audio_guide_text=(
                "El Foro Romano fue el corazón político, religioso y comercial de la "
                "antigua Roma durante casi mil años."
            ),
        ),
        Activity(
            id="lunch",
            title="Lunch in Monti",
            start_time="12:45",
            end_time="13:40",
            location_name="Rione Monti",
            coords=Coordinate(lat=41.8958, lon=12.4927),
            description="Trattoria near Piazza della Madonna dei Monti.",
            key_details="Coperto is normal on the bill.",
            price_eur=25,
            notes="Book ahead if possible",
        ),
        Activity(
            id="trevi",
            title="Trevi Fountain",
            start_time="14:00",
            end_time="14:30",
            location_name="Piazza di Trevi",
            coords=Coordinate(lat=41.9009, lon=12.4833),
            description="Throw a coin with your right hand over your left shoulder.",
            key_details="Watch your pockets in the crowd.",
            price_eur=1,
            audio_guide_text=(
                "La Fontana de Trevi, obra de Nicola Salvi terminada en 1762, es la "
                "fuente barroca más grande de Roma."
            ),
        ),
        Activity(
            id="pantheon",
            title="Pantheon",
            start_time="14:45",
            end_time="15:25",
            location_name="Piazza della Rotonda",
            coords=Coordinate(lat=41.8986, lon=12.4769),
            description="Temple turned church; the oculus is 9 m wide.",
            key_details="Timed ticket; queue moves fast.",
            price_eur=5,
            audio_guide_text=(
                "El Panteón, reconstruido por Adriano hacia el año 125, conserva la "
                "mayor cúpula de hormigón no armado del mundo."
            ),
        ),
        Activity(
            id="train-back",
            title="Train back to Civitavecchia",
            start_time="15:50",
            end_time="17:10",
            location_name="Roma Termini",
            end_location_name="Civitavecchia station",
            coords=ROMA_TERMINI,
            end_coords=CIVITAVECCHIA_STATION,
            description="Bus 64 or a taxi from the Pantheon to Termini. Same BIRG ticket.",
            key_details="Do not take a later train than 16:20.",
            type="transport",
            notes="CRITICAL",
            contingency_note="Missed it? Taxi to Civitavecchia costs about 150 EUR; call the port agent.",
        ),
        Activity(
            id="all-aboard",
            title="All aboard",
            start_time="17:30",
            end_time="18:30",
            location_name="Civitavecchia cruise terminal",
            coords=CIVITAVECCHIA_PORT,
            description="Walk or port shuttle back to the ship. Security check at the terminal.",
            key_details="The ship does not wait.",
            type="logistics",
            notes="CRITICAL",
        ),
    ]


PRONUNCIATIONS = [
    Pronunciation("Buongiorno", "bwon-JOR-no", "buon-yorno", "Good morning"),
    Pronunciation("Grazie", "GRAHT-tsyeh", "gratsie", "Thank you"),
    Pronunciation("Per favore", "pehr fah-VOH-reh", "per fabore", "Please"),
    Pronunciation("Scusi", "SKOO-zee", "scusi", "Excuse me"),
    Pronunciation("Quanto costa?", "KWAN-toh KOH-stah", "cuanto costa", "How much is it?"),
    Pronunciation("Dov'è il bagno?", "doh-VEH eel BAHN-yoh", "dobe il banio", "Where is the toilet?"),
    Pronunciation("Il conto, per favore", "eel KOHN-toh pehr fah-VOH-reh", "il conto per fabore", "The bill, please"),
    Pronunciation("Aiuto!", "ah-YOO-toh", "aiuto", "Help!"),
]

GPX_WAYPOINTS = [
    Waypoint(name="Metro Colosseo", lat=41.8913, lon=12.4907),
    Waypoint(name="Arch of Constantine", lat=41.8898, lon=12.4906),
    Waypoint(name="Altare della Patria", lat=41.8946, lon=12.4831),
    Waypoint(name="Piazza Venezia", lat=41.8960, lon=12.4823),
    Waypoint(name="Galleria Sciarra", lat=41.8997, lon=12.4817),
    Waypoint(name="Piazza della Minerva", lat=41.8978, lon=12.4775),
    Waypoint(name="Largo di Torre Argentina", lat=41.8955, lon=12.4768),
]

ROMAN_WALK_TRACK_POINTS = [
    (41.8913, 12.4907),
    (41.8902, 12.4922),
    (41.8898, 12.4906),
    (41.8925, 12.4853),
    (41.8946, 12.4831),
    (41.8958, 12.4927),
    (41.8960, 12.4823),
    (41.8997, 12.4817),
    (41.9009, 12.4833),
    (41.8986, 12.4769),
    (41.8978, 12.4775),
    (41.8955, 12.4768),
]
