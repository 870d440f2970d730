# -*- coding: utf-8 -*-
"""
Translation table for holiday names shared across regions.

Keys are holiday keys, values map a locale to the display name.
Region-specific holidays carry their names inline in the provider.
"""

TRANSLATIONS = {
    "newYearsDay": {
        "ca": "Any Nou",
        "de": "Neujahr",
        "en": "New Year's Day",
        "es": "Año Nuevo",
        "fr": "Jour de l'An",
        "it": "Capodanno",
        "nl": "Nieuwjaarsdag",
        "pt": "Dia de Ano Novo",
    },
    "internationalWorkersDay": {
        "de": "Tag der Arbeit",
        "en": "International Workers' Day",
        "es": "Día del Trabajador",
        "es_CL": "Día Nacional del Trabajo",
        "fr": "Fête du Travail",
        "it": "Festa del Lavoro",
        "nl": "Dag van de Arbeid",
        "pt": "Dia do Trabalhador",
    },
    "easter": {
        "de": "Ostersonntag",
        "en": "Easter Sunday",
        "es": "Domingo de Pascua",
        "fr": "Pâques",
        "it": "Pasqua",
        "nl": "Eerste Paasdag",
        "pt": "Páscoa",
    },
    "maundyThursday": {
        "ca": "dijous Sant",
        "da": "skærtorsdag",
        "el": "Μεγάλη Πέμπτη",
        "en": "Maundy Thursday",
        "es": "Jueves Santo",
        "nb": "skjærtorsdag",
    },
    "goodFriday": {
        "de": "Karfreitag",
        "en": "Good Friday",
        "es": "Viernes Santo",
        "fr": "Vendredi saint",
        "it": "Venerdì santo",
        "nl": "Goede Vrijdag",
        "pt": "Sexta-feira Santa",
    },
    "holySaturday": {
        "de": "Karsamstag",
        "en": "Holy Saturday",
        "es": "Sábado Santo",
        "fr": "Samedi saint",
        "it": "Sabato santo",
        "nl": "Stille Zaterdag",
        "pt": "Sábado de Aleluia",
    },
    "stPeterPaulsDay": {
        "de": "Peter und Paul",
        "en": "Feast of Saints Peter and Paul",
        "es": "San Pedro y San Pablo",
        "fr": "Saints Pierre et Paul",
        "it": "Santi Pietro e Paolo",
        "pt": "São Pedro e São Paulo",
    },
    "assumptionOfMary": {
        "de": "Mariä Himmelfahrt",
        "en": "Assumption of Mary",
        "es": "Asunción de la Virgen",
        "fr": "Assomption",
        "it": "Assunzione di Maria",
        "nl": "Onze Lieve Vrouw Hemelvaart",
        "pt": "Assunção de Nossa Senhora",
    },
    "allSaintsDay": {
        "de": "Allerheiligen",
        "en": "All Saints' Day",
        "es": "Día de Todos los Santos",
        "fr": "La Toussaint",
        "it": "Ognissanti",
        "nl": "Allerheiligen",
        "pt": "Dia de Todos-os-Santos",
    },
    "immaculateConception": {
        "de": "Mariä Empfängnis",
        "en": "Immaculate Conception",
        "es": "Inmaculada Concepción",
        "fr": "Immaculée Conception",
        "it": "Immacolata Concezione",
        "pt": "Imaculada Conceição",
    },
    "christmasDay": {
        "de": "1. Weihnachtsfeiertag",
        "en": "Christmas",
        "es": "Navidad",
        "fr": "Noël",
        "it": "Natale",
        "nl": "Eerste Kerstdag",
        "pt": "Natal",
    },
}
