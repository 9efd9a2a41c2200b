"""
CGI 2025, Part 2, Title 1, Chapter 1: Impôts locaux (Art. 250 to 340 bis)

Property contributions (CFPB, CFPNB), business licence (patente),
regional tax and entertainment tax. Weighted keyword table only: the
chapter has no curated metadata.
"""

from types import MappingProxyType

KEYWORDS = MappingProxyType({
    "impôts locaux": [
        ("Art. 250", 1.0),
    ],
    "impots locaux": [
        ("Art. 250", 1.0),
    ],
    "répartition impôts": [
        ("Art. 250", 1.0),
    ],
    "85%": [
        ("Art. 250", 0.9),
    ],
    "85% collectivités": [
        ("Art. 250", 1.0),
    ],
    "10% administration": [
        ("Art. 250", 1.0),
    ],
    "5% chambres commerce": [
        ("Art. 250", 1.0),
    ],
    "collectivités locales": [
        ("Art. 250", 0.9),
    ],
    "chambres de commerce": [
        ("Art. 250", 0.9),
    ],

    "cfpb": [
        ("Art. 251", 1.0),
        ("Art. 252", 0.9),
        ("Art. 257", 0.8),
        ("Art. 258 ter", 0.8),
    ],
    "contribution foncière propriétés bâties": [
        ("Art. 251", 1.0),
        ("Art. 252", 0.9),
    ],
    "propriétés bâties": [
        ("Art. 251", 1.0),
        ("Art. 252", 0.9),
        ("Art. 253", 0.8),
    ],
    "proprietes baties": [
        ("Art. 251", 1.0),
        ("Art. 252", 0.9),
    ],
    "foncier bâti": [
        ("Art. 251", 1.0),
        ("Art. 257", 0.9),
    ],
    "immeuble": [
        ("Art. 251", 0.8),
    ],
    "impôt foncier bâti": [
        ("Art. 251", 1.0),
        ("Art. 258 ter", 0.9),
    ],
    "constructions": [
        ("Art. 251", 0.9),
        ("Art. 253", 0.8),
    ],
    "bâtiments": [
        ("Art. 251", 0.9),
        ("Art. 253", 0.8),
    ],
    "immeubles": [
        ("Art. 251", 0.9),
        ("Art. 252", 0.8),
    ],
    "propriétaire": [
        ("Art. 252", 1.0),
    ],
    "usufruitier": [
        ("Art. 252", 1.0),
    ],
    "usufruit": [
        ("Art. 252", 1.0),
    ],
    "redevable cfpb": [
        ("Art. 252", 1.0),
    ],

    "exemption cfpb": [
        ("Art. 253", 1.0),
        ("Art. 254", 1.0),
    ],
    "exonération cfpb": [
        ("Art. 253", 1.0),
        ("Art. 254", 1.0),
    ],
    "exemptions permanentes": [
        ("Art. 253", 1.0),
    ],
    "exemptions temporaires": [
        ("Art. 254", 1.0),
    ],
    "édifices culte": [
        ("Art. 253", 0.9),
    ],
    "bâtiments agricoles": [
        ("Art. 253", 0.9),
    ],
    "granges": [
        ("Art. 253", 0.9),
    ],
    "hangars": [
        ("Art. 253", 0.9),
    ],
    "écuries": [
        ("Art. 253", 0.9),
    ],
    "ambassades": [
        ("Art. 253", 0.9),
    ],
    "défense passive": [
        ("Art. 253", 0.9),
    ],
    "constructions nouvelles": [
        ("Art. 254", 1.0),
    ],
    "5 ans exemption": [
        ("Art. 254", 1.0),
    ],
    "10 ans exemption": [
        ("Art. 254", 1.0),
    ],
    "25 ans exemption": [
        ("Art. 254", 1.0),
    ],
    "habitation principale": [
        ("Art. 254", 0.9),
    ],
    "logement personnel": [
        ("Art. 254", 1.0),
    ],

    "valeur locative": [
        ("Art. 257", 1.0),
        ("Art. 257 bis", 0.9),
        ("Art. 276", 0.8),
    ],
    "valeur locative cadastrale": [
        ("Art. 257", 1.0),
    ],
    "revenu cadastral": [
        ("Art. 257", 0.9),
    ],
    "75% déduction": [
        ("Art. 257", 1.0),
    ],
    "déduction 75%": [
        ("Art. 257", 1.0),
    ],
    "frais gestion": [
        ("Art. 257", 0.9),
    ],
    "frais entretien": [
        ("Art. 257", 0.9),
    ],
    "zones tarifaires": [
        ("Art. 258", 1.0),
        ("Art. 258 bis", 0.9),
        ("Art. 270", 0.8),
    ],
    "zone 1": [
        ("Art. 258", 0.9),
        ("Art. 270", 0.8),
    ],
    "zone 2": [
        ("Art. 258", 0.9),
        ("Art. 270", 0.8),
    ],
    "zone 3": [
        ("Art. 258", 0.9),
        ("Art. 270", 0.8),
    ],
    "zone 4": [
        ("Art. 258", 0.9),
        ("Art. 270", 0.8),
    ],
    "250 fcfa": [
        ("Art. 258", 1.0),
    ],
    "150 fcfa": [
        ("Art. 258", 1.0),
    ],
    "25 fcfa": [
        ("Art. 258", 0.9),
    ],
    "12,5 fcfa": [
        ("Art. 258", 0.9),
    ],
    "prix m2": [
        ("Art. 258", 0.9),
        ("Art. 270", 0.8),
    ],
    "prix mètre carré": [
        ("Art. 258", 0.9),
    ],
    "centre-ville": [
        ("Art. 258", 0.9),
        ("Art. 270", 0.8),
    ],
    "communes plein exercice": [
        ("Art. 258", 0.9),
    ],
    "chefs-lieux départements": [
        ("Art. 258", 0.9),
    ],
    "chefs-lieux districts": [
        ("Art. 258", 0.9),
    ],
    "réduction étage": [
        ("Art. 258 bis", 1.0),
    ],
    "50% par étage": [
        ("Art. 258 bis", 1.0),
    ],

    "taux cfpb": [
        ("Art. 258 ter", 1.0),
    ],
    "20% cfpb": [
        ("Art. 258 ter", 1.0),
    ],
    "taux maximum cfpb": [
        ("Art. 258 ter", 1.0),
    ],
    "1000 fcfa minimum": [
        ("Art. 258 ter", 0.9),
        ("Art. 272", 0.8),
    ],
    "minimum perception": [
        ("Art. 258 ter", 0.9),
        ("Art. 272", 0.8),
    ],

    "déclaration cfpb": [
        ("Art. 260", 1.0),
        ("Art. 261", 0.9),
    ],
    "fait générateur": [
        ("Art. 260", 1.0),
    ],
    "1er janvier": [
        ("Art. 260", 0.9),
    ],
    "avis imposition": [
        ("Art. 261", 0.9),
        ("Art. 274", 0.8),
    ],
    "paiement cfpb": [
        ("Art. 262", 1.0),
    ],
    "réclamation": [
        ("Art. 262", 0.9),
        ("Art. 275", 0.8),
    ],

    "cfpnb": [
        ("Art. 263", 1.0),
        ("Art. 264", 0.9),
        ("Art. 270", 0.8),
        ("Art. 272", 0.8),
    ],
    "contribution foncière propriétés non bâties": [
        ("Art. 263", 1.0),
        ("Art. 264", 0.9),
    ],
    "propriétés non bâties": [
        ("Art. 263", 1.0),
        ("Art. 264", 0.9),
        ("Art. 265", 0.8),
    ],
    "proprietes non baties": [
        ("Art. 263", 1.0),
        ("Art. 264", 0.9),
    ],
    "foncier non bâti": [
        ("Art. 263", 1.0),
        ("Art. 270", 0.9),
    ],
    "impôt foncier non bâti": [
        ("Art. 263", 1.0),
        ("Art. 272", 0.9),
    ],
    "terrains": [
        ("Art. 263", 0.9),
        ("Art. 264", 0.8),
    ],
    "terrains urbains": [
        ("Art. 264", 1.0),
    ],
    "terrains ruraux": [
        ("Art. 264", 1.0),
        ("Art. 270 bis", 0.9),
    ],
    "sols": [
        ("Art. 263", 0.8),
    ],
    "périmètre urbain": [
        ("Art. 264", 0.9),
    ],

    "exemption cfpnb": [
        ("Art. 265", 1.0),
        ("Art. 266", 1.0),
    ],
    "exonération cfpnb": [
        ("Art. 265", 1.0),
        ("Art. 266", 1.0),
    ],
    "propriétés état": [
        ("Art. 265", 0.9),
    ],
    "voies ferrées": [
        ("Art. 265", 0.9),
    ],
    "canaux navigation": [
        ("Art. 265", 0.9),
    ],
    "cimetières": [
        ("Art. 265", 0.9),
    ],
    "cultures maraîchères": [
        ("Art. 266", 1.0),
    ],
    "5 hectares": [
        ("Art. 266", 0.9),
    ],
    "25 km agglomération": [
        ("Art. 266", 0.9),
    ],
    "plantations nouvelles": [
        ("Art. 266", 0.9),
    ],
    "élevage": [
        ("Art. 266", 0.9),
        ("Art. 270 bis", 0.8),
    ],
    "6 ans élevage": [
        ("Art. 266", 1.0),
    ],
    "hévéas": [
        ("Art. 266", 0.9),
    ],
    "palmiers": [
        ("Art. 266", 0.9),
        ("Art. 270 bis", 0.8),
    ],
    "10 ans palmiers": [
        ("Art. 266", 1.0),
    ],
    "arbres fruitiers": [
        ("Art. 266", 0.9),
    ],
    "8 ans fruitiers": [
        ("Art. 266", 1.0),
    ],
    "café cacao": [
        ("Art. 266", 0.9),
    ],
    "7 ans café": [
        ("Art. 266", 1.0),
    ],
    "3 ans cultures": [
        ("Art. 266", 1.0),
    ],

    "déclaration cfpnb": [
        ("Art. 267", 1.0),
        ("Art. 268", 0.9),
    ],
    "avant 1er octobre": [
        ("Art. 267", 1.0),
        ("Art. 276", 0.9),
    ],

    "valeur cadastrale": [
        ("Art. 270", 1.0),
    ],
    "50% base": [
        ("Art. 270", 1.0),
    ],
    "base 50%": [
        ("Art. 270", 1.0),
    ],
    "125 fcfa": [
        ("Art. 270", 1.0),
    ],
    "75 fcfa": [
        ("Art. 270", 1.0),
    ],
    "6,25 fcfa": [
        ("Art. 270", 0.9),
    ],
    "tarifs ruraux": [
        ("Art. 270 bis", 1.0),
    ],
    "tarif hectare": [
        ("Art. 270 bis", 1.0),
    ],
    "2000 fcfa/ha": [
        ("Art. 270 bis", 1.0),
    ],
    "1000 fcfa/ha": [
        ("Art. 270 bis", 1.0),
    ],
    "600 fcfa/ha": [
        ("Art. 270 bis", 1.0),
    ],
    "caféiers": [
        ("Art. 270 bis", 0.9),
    ],
    "caoutchouc": [
        ("Art. 270 bis", 0.9),
    ],
    "forêts": [
        ("Art. 270 bis", 0.9),
    ],
    "non mis en valeur": [
        ("Art. 270 bis", 0.9),
    ],

    "taux cfpnb": [
        ("Art. 272", 1.0),
    ],
    "40% cfpnb": [
        ("Art. 272", 1.0),
    ],
    "taux maximum cfpnb": [
        ("Art. 272", 1.0),
    ],

    "paiement cfpnb": [
        ("Art. 275", 1.0),
    ],

    "déclaration locataires": [
        ("Art. 276", 1.0),
    ],

    "patente": [
        ("Art. 277", 1.0),
        ("Art. 278", 0.9),
        ("Art. 314", 0.9),
    ],
    "contribution patentes": [
        ("Art. 277", 1.0),
    ],
    "droit patente": [
        ("Art. 277", 1.0),
    ],
    "activité commerciale": [
        ("Art. 277", 0.9),
    ],
    "activité industrielle": [
        ("Art. 277", 0.9),
    ],
    "profession": [
        ("Art. 277", 0.8),
    ],

    "chiffre affaires patente": [
        ("Art. 278", 1.0),
    ],
    "ca patente": [
        ("Art. 278", 1.0),
    ],
    "assiette patente": [
        ("Art. 278", 1.0),
    ],

    "exemption patente": [
        ("Art. 279", 1.0),
    ],
    "exonération patente": [
        ("Art. 279", 1.0),
    ],
    "artistes": [
        ("Art. 279", 0.9),
    ],
    "peintres": [
        ("Art. 279", 0.9),
    ],
    "sculpteurs": [
        ("Art. 279", 0.9),
    ],
    "graveurs": [
        ("Art. 279", 0.9),
    ],
    "pêcheurs": [
        ("Art. 279", 0.9),
    ],
    "piroguiers": [
        ("Art. 279", 0.9),
    ],
    "caisses épargne": [
        ("Art. 279", 0.9),
    ],
    "mutuelles": [
        ("Art. 279", 0.9),
    ],
    "ouvriers": [
        ("Art. 279", 0.8),
    ],
    "couturiers": [
        ("Art. 279", 0.9),
    ],
    "économats": [
        ("Art. 279", 0.9),
    ],
    "coopératives": [
        ("Art. 279", 0.9),
    ],

    "entité fiscale": [
        ("Art. 281", 1.0),
    ],
    "établissement": [
        ("Art. 281", 0.9),
    ],
    "succursale": [
        ("Art. 281", 0.9),
    ],
    "titre patente": [
        ("Art. 282", 1.0),
    ],
    "affichage patente": [
        ("Art. 285", 1.0),
    ],
    "début activité": [
        ("Art. 287", 1.0),
    ],
    "cessation activité": [
        ("Art. 289", 1.0),
    ],
    "transfert établissement": [
        ("Art. 290", 1.0),
    ],
    "annuité patente": [
        ("Art. 287", 0.9),
    ],

    "sociétés étrangères": [
        ("Art. 294", 1.0),
    ],
    "marchés publics sociétés": [
        ("Art. 294", 0.9),
    ],
    "15 jours début activité": [
        ("Art. 294", 1.0),
    ],
    "patente provisoire": [
        ("Art. 294", 0.9),
    ],
    "ambulants": [
        ("Art. 295", 1.0),
    ],
    "marchands ambulants": [
        ("Art. 295", 1.0),
    ],
    "forains": [
        ("Art. 295", 0.9),
    ],
    "transporteurs": [
        ("Art. 296", 1.0),
    ],
    "transporteurs fluviaux": [
        ("Art. 296", 1.0),
    ],
    "sociétés pétrolières": [
        ("Art. 297", 1.0),
    ],
    "50% droits": [
        ("Art. 297", 1.0),
    ],

    "matrices patente": [
        ("Art. 301", 1.0),
        ("Art. 302", 0.9),
    ],
    "rôle patente": [
        ("Art. 303", 1.0),
    ],
    "titre perception": [
        ("Art. 304", 1.0),
    ],
    "paiement patente": [
        ("Art. 305", 1.0),
    ],
    "10-20 avril": [
        ("Art. 305", 1.0),
    ],
    "paiement fractionné": [
        ("Art. 305", 0.9),
    ],
    "100 000 fcfa": [
        ("Art. 305", 0.9),
    ],
    "retard paiement patente": [
        ("Art. 306", 1.0),
    ],
    "100% pénalité": [
        ("Art. 306", 1.0),
    ],
    "stand-by": [
        ("Art. 307", 1.0),
    ],
    "stand by": [
        ("Art. 307", 1.0),
    ],
    "25% stand-by": [
        ("Art. 307", 1.0),
    ],
    "activité intermittente": [
        ("Art. 307", 0.9),
    ],
    "déclaration patente": [
        ("Art. 308", 1.0),
        ("Art. 309", 0.9),
        ("Art. 312", 0.8),
    ],
    "contrôle patente": [
        ("Art. 310", 1.0),
    ],
    "entrepôt": [
        ("Art. 311", 1.0),
    ],
    "500 000 fcfa amende": [
        ("Art. 311", 1.0),
    ],
    "déclaration ca": [
        ("Art. 312", 1.0),
    ],
    "30 avril": [
        ("Art. 312", 1.0),
    ],
    "sanctions patente": [
        ("Art. 313", 1.0),
    ],

    "barème patente": [
        ("Art. 314", 1.0),
    ],
    "tarif patente": [
        ("Art. 314", 1.0),
    ],
    "taux patente": [
        ("Art. 314", 1.0),
    ],
    "0,750%": [
        ("Art. 314", 1.0),
    ],
    "0,650%": [
        ("Art. 314", 1.0),
    ],
    "0,450%": [
        ("Art. 314", 1.0),
    ],
    "0,200%": [
        ("Art. 314", 1.0),
    ],
    "0,150%": [
        ("Art. 314", 1.0),
    ],
    "0,140%": [
        ("Art. 314", 1.0),
    ],
    "0,135%": [
        ("Art. 314", 1.0),
    ],
    "0,125%": [
        ("Art. 314", 1.0),
    ],
    "0,045%": [
        ("Art. 314", 1.0),
    ],
    "10 000 fcfa minimum": [
        ("Art. 314", 1.0),
    ],
    "minimum forfaitaire": [
        ("Art. 314", 0.9),
    ],
    "progressif patente": [
        ("Art. 314", 0.9),
    ],
    "20 millions": [
        ("Art. 314", 0.8),
    ],
    "40 millions": [
        ("Art. 314", 0.8),
    ],
    "100 millions": [
        ("Art. 314", 0.8),
    ],
    "300 millions": [
        ("Art. 314", 0.8),
    ],
    "500 millions": [
        ("Art. 314", 0.8),
    ],
    "1 milliard": [
        ("Art. 314", 0.8),
    ],
    "3 milliards": [
        ("Art. 314", 0.8),
    ],
    "20 milliards": [
        ("Art. 314", 0.8),
    ],

    "taxe régionale": [
        ("Art. 321", 1.0),
        ("Art. 322", 0.9),
        ("Art. 326", 0.8),
    ],
    "taxe regionale": [
        ("Art. 321", 1.0),
        ("Art. 322", 0.9),
    ],
    "personnes physiques": [
        ("Art. 321", 0.9),
    ],
    "18 ans": [
        ("Art. 321", 1.0),
    ],
    "âge minimum": [
        ("Art. 321", 0.9),
    ],
    "résidence": [
        ("Art. 322", 0.9),
    ],
    "exemption taxe régionale": [
        ("Art. 323", 1.0),
    ],
    "diplomates": [
        ("Art. 323", 0.9),
    ],
    "aveugles": [
        ("Art. 323", 0.9),
    ],
    "mutilés guerre": [
        ("Art. 323", 0.9),
    ],
    "indigents": [
        ("Art. 323", 0.9),
    ],
    "recouvrement taxe régionale": [
        ("Art. 324", 1.0),
    ],
    "rôle nominatif": [
        ("Art. 324", 0.9),
    ],
    "120 000 fcfa": [
        ("Art. 324", 1.0),
    ],
    "précompte employeur": [
        ("Art. 325", 1.0),
    ],
    "précompte janvier": [
        ("Art. 325", 1.0),
    ],
    "tarif taxe régionale": [
        ("Art. 326", 1.0),
    ],
    "paiement taxe régionale": [
        ("Art. 327", 1.0),
    ],

    "taxe spectacles": [
        ("Art. 331", 1.0),
        ("Art. 333", 0.9),
    ],
    "taxe sur les spectacles": [
        ("Art. 331", 1.0),
    ],
    "spectacles": [
        ("Art. 331", 1.0),
        ("Art. 332", 0.9),
    ],
    "jeux": [
        ("Art. 331", 0.9),
    ],
    "divertissements": [
        ("Art. 331", 0.9),
    ],
    "exemption spectacles": [
        ("Art. 332", 1.0),
    ],
    "manifestations sportives": [
        ("Art. 332", 0.9),
    ],
    "spectacles éducatifs": [
        ("Art. 332", 0.9),
    ],
    "fêtes patronales": [
        ("Art. 332", 0.9),
    ],
    "tarif spectacles": [
        ("Art. 333", 1.0),
    ],
    "15% spectacles": [
        ("Art. 333", 0.9),
    ],
    "30% spectacles": [
        ("Art. 333", 0.9),
    ],
    "200 fcfa entrée": [
        ("Art. 333", 1.0),
    ],
    "bar dancing": [
        ("Art. 334", 1.0),
    ],
    "bars dancings": [
        ("Art. 334", 1.0),
    ],
    "bar-dancing": [
        ("Art. 334", 1.0),
    ],
    "dancing": [
        ("Art. 334", 1.0),
    ],
    "musiciens": [
        ("Art. 334", 0.9),
    ],
    "pick-up": [
        ("Art. 334", 0.9),
    ],
    "pickup": [
        ("Art. 334", 0.9),
    ],
    "240 000 fcfa": [
        ("Art. 334", 1.0),
    ],
    "100 000 fcfa pickup": [
        ("Art. 334", 1.0),
    ],
    "120 000 fcfa non permanent": [
        ("Art. 334", 0.9),
    ],
    "50 000 fcfa": [
        ("Art. 334", 0.9),
    ],
    "permanent": [
        ("Art. 334", 0.8),
    ],
    "non permanent": [
        ("Art. 334", 0.8),
    ],
    "salle bal": [
        ("Art. 335", 1.0),
    ],
    "4 000 fcfa bal": [
        ("Art. 335", 1.0),
    ],
    "cercles privés": [
        ("Art. 336", 1.0),
    ],
    "10% recettes": [
        ("Art. 336", 1.0),
    ],
    "appareils jeux": [
        ("Art. 337", 1.0),
    ],
    "baby-foot": [
        ("Art. 337", 0.9),
    ],
    "billard": [
        ("Art. 337", 0.9),
    ],
    "déclaration spectacles": [
        ("Art. 340", 1.0),
        ("Art. 340 bis", 0.9),
    ],
    "24h avant": [
        ("Art. 340", 1.0),
    ],
    "relevé recettes": [
        ("Art. 340", 0.9),
    ],
    "15 jours du mois": [
        ("Art. 340", 0.9),
    ],
    "spectacle occasionnel": [
        ("Art. 340", 0.9),
    ],
    "3 jours après": [
        ("Art. 340", 0.9),
    ],
    "billets entrée": [
        ("Art. 338", 1.0),
    ],
    "tickets spectacles": [
        ("Art. 338", 0.9),
    ],
    "paiement spectacles": [
        ("Art. 339", 1.0),
    ],
})

SYNONYMS = MappingProxyType({
    "cfpb": ["contribution foncière propriétés bâties", "foncier bâti", "impôt foncier bâti", "impôt immobilier"],
    "cfpnb": ["contribution foncière propriétés non bâties", "foncier non bâti", "impôt foncier non bâti", "impôt terrain"],
    "patente": ["contribution des patentes", "droit de patente", "impôt activité"],
    "taxe régionale": ["impôt régional", "taxe locale"],
    "taxe spectacles": ["taxe divertissements", "taxe jeux", "impôt spectacles"],
    "valeur locative": ["revenu cadastral", "base foncière"],
    "immeuble": ["propriété bâtie", "bâtiment"],
    "bar dancing": ["dancing", "discothèque", "boîte de nuit"],
})
