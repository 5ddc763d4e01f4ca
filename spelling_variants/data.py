"""Static British (en-GB) to American (en-US) spelling data.

Keys are canonical lowercase British spellings and values their canonical
lowercase American counterparts. Both keys and values are unique, so every
pair translates cleanly in either direction.
"""

SPELLINGS: dict[str, str] = {
    "colour": "color",
    "colours": "colors",
    "coloured": "colored",
    "colouring": "coloring",
    "colourful": "colorful",
    "colourless": "colorless",
    "favour": "favor",
    "favours": "favors",
    "favoured": "favored",
    "favourite": "favorite",
    "favourites": "favorites",
    "favourable": "favorable",
    "honour": "honor",
    "honours": "honors",
    "honoured": "honored",
    "honourable": "honorable",
    "humour": "humor",
    "humoured": "humored",
    "labour": "labor",
    "labours": "labors",
    "laboured": "labored",
    "labourer": "laborer",
    "neighbour": "neighbor",
    "neighbours": "neighbors",
    "neighbourhood": "neighborhood",
    "neighbouring": "neighboring",
    "behaviour": "behavior",
    "behaviours": "behaviors",
    "behavioural": "behavioral",
    "flavour": "flavor",
    "flavours": "flavors",
    "flavoured": "flavored",
    "harbour": "harbor",
    "harbours": "harbors",
    "odour": "odor",
    "odours": "odors",
    "rumour": "rumor",
    "rumours": "rumors",
    "vapour": "vapor",
    "vigour": "vigor",
    "valour": "valor",
    "savour": "savor",
    "savoury": "savory",
    "armour": "armor",
    "armoured": "armored",
    "endeavour": "endeavor",
    "endeavours": "endeavors",
    "parlour": "parlor",
    "rancour": "rancor",
    "splendour": "splendor",
    "tumour": "tumor",
    "fervour": "fervor",
    "clamour": "clamor",
    "demeanour": "demeanor",
    "candour": "candor",
    "ardour": "ardor",
    "saviour": "savior",
    "centre": "center",
    "centres": "centers",
    "centred": "centered",
    "theatre": "theater",
    "theatres": "theaters",
    "metre": "meter",
    "metres": "meters",
    "litre": "liter",
    "litres": "liters",
    "fibre": "fiber",
    "fibres": "fibers",
    "calibre": "caliber",
    "sombre": "somber",
    "spectre": "specter",
    "lustre": "luster",
    "sabre": "saber",
    "meagre": "meager",
    "manoeuvre": "maneuver",
    "manoeuvres": "maneuvers",
    "manoeuvrable": "maneuverable",
    "goitre": "goiter",
    "mitre": "miter",
    "sceptre": "scepter",
    "louvre": "louver",
    "ochre": "ocher",
    "reconnoitre": "reconnoiter",
    "sepulchre": "sepulcher",
    "kilometre": "kilometer",
    "centimetre": "centimeter",
    "millimetre": "millimeter",
    "organise": "organize",
    "organised": "organized",
    "organises": "organizes",
    "organising": "organizing",
    "organisation": "organization",
    "organisations": "organizations",
    "realise": "realize",
    "realised": "realized",
    "realises": "realizes",
    "realising": "realizing",
    "recognise": "recognize",
    "recognised": "recognized",
    "recognising": "recognizing",
    "apologise": "apologize",
    "apologised": "apologized",
    "criticise": "criticize",
    "criticised": "criticized",
    "emphasise": "emphasize",
    "emphasised": "emphasized",
    "summarise": "summarize",
    "summarised": "summarized",
    "prioritise": "prioritize",
    "optimise": "optimize",
    "optimised": "optimized",
    "optimisation": "optimization",
    "minimise": "minimize",
    "maximise": "maximize",
    "standardise": "standardize",
    "categorise": "categorize",
    "finalise": "finalize",
    "specialise": "specialize",
    "specialised": "specialized",
    "customise": "customize",
    "customised": "customized",
    "authorise": "authorize",
    "authorised": "authorized",
    "authorisation": "authorization",
    "utilise": "utilize",
    "memorise": "memorize",
    "visualise": "visualize",
    "visualisation": "visualization",
    "normalise": "normalize",
    "capitalise": "capitalize",
    "civilisation": "civilization",
    "globalisation": "globalization",
    "modernise": "modernize",
    "mobilise": "mobilize",
    "sympathise": "sympathize",
    "hospitalise": "hospitalize",
    "legalise": "legalize",
    "publicise": "publicize",
    "patronise": "patronize",
    "jeopardise": "jeopardize",
    "fertiliser": "fertilizer",
    "colonise": "colonize",
    "analyse": "analyze",
    "analysed": "analyzed",
    "analysing": "analyzing",
    "paralyse": "paralyze",
    "paralysed": "paralyzed",
    "catalyse": "catalyze",
    "breathalyse": "breathalyze",
    "defence": "defense",
    "offence": "offense",
    "licence": "license",
    "pretence": "pretense",
    "traveller": "traveler",
    "travellers": "travelers",
    "travelled": "traveled",
    "travelling": "traveling",
    "cancelled": "canceled",
    "cancelling": "canceling",
    "labelled": "labeled",
    "labelling": "labeling",
    "modelled": "modeled",
    "modelling": "modeling",
    "fuelled": "fueled",
    "fuelling": "fueling",
    "signalled": "signaled",
    "counsellor": "counselor",
    "jewellery": "jewelry",
    "jeweller": "jeweler",
    "marvellous": "marvelous",
    "woollen": "woolen",
    "quarrelled": "quarreled",
    "levelled": "leveled",
    "tunnelling": "tunneling",
    "channelled": "channeled",
    "dialled": "dialed",
    "totalled": "totaled",
    "enrolment": "enrollment",
    "fulfil": "fulfill",
    "fulfilment": "fulfillment",
    "instalment": "installment",
    "skilful": "skillful",
    "wilful": "willful",
    "distil": "distill",
    "enthral": "enthrall",
    "catalogue": "catalog",
    "catalogues": "catalogs",
    "analogue": "analog",
    "aeroplane": "airplane",
    "aeroplanes": "airplanes",
    "anaemia": "anemia",
    "anaemic": "anemic",
    "anaesthetic": "anesthetic",
    "anaesthesia": "anesthesia",
    "encyclopaedia": "encyclopedia",
    "paediatric": "pediatric",
    "paediatrician": "pediatrician",
    "haemoglobin": "hemoglobin",
    "haemorrhage": "hemorrhage",
    "leukaemia": "leukemia",
    "oesophagus": "esophagus",
    "oestrogen": "estrogen",
    "foetus": "fetus",
    "diarrhoea": "diarrhea",
    "orthopaedic": "orthopedic",
    "mediaeval": "medieval",
    "grey": "gray",
    "greys": "grays",
    "greyish": "grayish",
    "plough": "plow",
    "ploughs": "plows",
    "ploughed": "plowed",
    "mould": "mold",
    "moulds": "molds",
    "moult": "molt",
    "smoulder": "smolder",
    "sceptic": "skeptic",
    "sceptical": "skeptical",
    "scepticism": "skepticism",
    "programme": "program",
    "programmes": "programs",
    "pyjamas": "pajamas",
    "aluminium": "aluminum",
    "artefact": "artifact",
    "artefacts": "artifacts",
    "judgement": "judgment",
    "acknowledgement": "acknowledgment",
    "ageing": "aging",
    "yoghurt": "yogurt",
    "doughnut": "donut",
    "cosy": "cozy",
    "cosier": "cozier",
    "sulphur": "sulfur",
    "sulphate": "sulfate",
    "gramme": "gram",
    "kilogramme": "kilogram",
    "omelette": "omelet",
    "axe": "ax",
    "annexe": "annex",
    "speciality": "specialty",
}
