"""
US metro areas used as Text Search location-bias centers.

Covers ~80% of the US population; smaller metros with active skate scenes
and regional gaps are appended after the top 150.
"""
from src.models import MetroArea

US_METRO_AREAS = [
    # Top 50 metros by population
    MetroArea("New York", 40.7128, -74.006),
    MetroArea("Los Angeles", 34.0522, -118.2437),
    MetroArea("Chicago", 41.8781, -87.6298),
    MetroArea("Dallas-Fort Worth", 32.7767, -96.797),
    MetroArea("Houston", 29.7604, -95.3698),
    MetroArea("Washington DC", 38.9072, -77.0369),
    MetroArea("Philadelphia", 39.9526, -75.1652),
    MetroArea("Miami", 25.7617, -80.1918),
    MetroArea("Atlanta", 33.749, -84.388),
    MetroArea("Boston", 42.3601, -71.0589),
    MetroArea("Phoenix", 33.4484, -112.074),
    MetroArea("San Francisco", 37.7749, -122.4194),
    MetroArea("Riverside", 33.9533, -117.3962),
    MetroArea("Detroit", 42.3314, -83.0458),
    MetroArea("Seattle", 47.6062, -122.3321),
    MetroArea("Minneapolis", 44.9778, -93.265),
    MetroArea("San Diego", 32.7157, -117.1611),
    MetroArea("Tampa", 27.9506, -82.4572),
    MetroArea("Denver", 39.7392, -104.9903),
    MetroArea("St. Louis", 38.627, -90.1994),
    MetroArea("Baltimore", 39.2904, -76.6122),
    MetroArea("Orlando", 28.5383, -81.3792),
    MetroArea("Charlotte", 35.2271, -80.8431),
    MetroArea("San Antonio", 29.4241, -98.4936),
    MetroArea("Portland", 45.5152, -122.6784),
    MetroArea("Sacramento", 38.5816, -121.4944),
    MetroArea("Pittsburgh", 40.4406, -79.9959),
    MetroArea("Las Vegas", 36.1699, -115.1398),
    MetroArea("Austin", 30.2672, -97.7431),
    MetroArea("Cincinnati", 39.1031, -84.512),
    MetroArea("Kansas City", 39.0997, -94.5786),
    MetroArea("Columbus", 39.9612, -82.9988),
    MetroArea("Indianapolis", 39.7684, -86.1581),
    MetroArea("Cleveland", 41.4993, -81.6944),
    MetroArea("San Jose", 37.3382, -121.8863),
    MetroArea("Nashville", 36.1627, -86.7816),
    MetroArea("Virginia Beach", 36.8529, -75.978),
    MetroArea("Providence", 41.824, -71.4128),
    MetroArea("Milwaukee", 43.0389, -87.9065),
    MetroArea("Jacksonville", 30.3322, -81.6557),
    MetroArea("Oklahoma City", 35.4676, -97.5164),
    MetroArea("Raleigh", 35.7796, -78.6382),
    MetroArea("Memphis", 35.1495, -90.049),
    MetroArea("Richmond", 37.5407, -77.436),
    MetroArea("Louisville", 38.2527, -85.7585),
    MetroArea("New Orleans", 29.9511, -90.0715),
    MetroArea("Salt Lake City", 40.7608, -111.891),
    MetroArea("Hartford", 41.7658, -72.6734),
    MetroArea("Buffalo", 42.8864, -78.8784),
    MetroArea("Birmingham", 33.5207, -86.8025),

    # Additional metros (51-100)
    MetroArea("Rochester NY", 43.1566, -77.6088),
    MetroArea("Grand Rapids", 42.9634, -85.6681),
    MetroArea("Tucson", 32.2226, -110.9747),
    MetroArea("Tulsa", 36.154, -95.9928),
    MetroArea("Fresno", 36.7378, -119.7871),
    MetroArea("Bridgeport CT", 41.1865, -73.1952),
    MetroArea("Worcester MA", 42.2626, -71.8023),
    MetroArea("Albuquerque", 35.0844, -106.6504),
    MetroArea("Omaha", 41.2565, -95.9345),
    MetroArea("Albany NY", 42.6526, -73.7562),
    MetroArea("Bakersfield", 35.3733, -119.0187),
    MetroArea("Knoxville", 35.9606, -83.9207),
    MetroArea("New Haven", 41.3083, -72.9279),
    MetroArea("Greenville SC", 34.8526, -82.394),
    MetroArea("Oxnard", 34.1975, -119.1771),
    MetroArea("El Paso", 31.7619, -106.485),
    MetroArea("Allentown", 40.6084, -75.4902),
    MetroArea("Baton Rouge", 30.4515, -91.1871),
    MetroArea("Dayton", 39.7589, -84.1916),
    MetroArea("McAllen", 26.2034, -98.23),
    MetroArea("Columbia SC", 34.0007, -81.0348),
    MetroArea("Greensboro", 36.0726, -79.792),
    MetroArea("Akron", 41.0814, -81.519),
    MetroArea("Little Rock", 34.7465, -92.2896),
    MetroArea("Stockton", 37.9577, -121.2908),
    MetroArea("Colorado Springs", 38.8339, -104.8214),
    MetroArea("Syracuse", 43.0481, -76.1474),
    MetroArea("Charleston SC", 32.7765, -79.9311),
    MetroArea("Cape Coral", 26.5629, -81.9495),
    MetroArea("Springfield MA", 42.1015, -72.5898),
    MetroArea("Boise", 43.615, -116.2023),
    MetroArea("Wichita", 37.6872, -97.3301),
    MetroArea("Lakeland", 28.0395, -81.9498),
    MetroArea("Madison", 43.0731, -89.4012),
    MetroArea("Ogden", 41.223, -111.9738),
    MetroArea("Winston-Salem", 36.0999, -80.2442),
    MetroArea("Des Moines", 41.5868, -93.625),
    MetroArea("Toledo", 41.6528, -83.5379),
    MetroArea("Durham", 35.994, -78.8986),
    MetroArea("Deltona", 28.9005, -81.2637),

    # Additional metros (101-150)
    MetroArea("Honolulu", 21.3069, -157.8583),
    MetroArea("Provo", 40.2338, -111.6585),
    MetroArea("Jackson MS", 32.2988, -90.1848),
    MetroArea("Harrisburg", 40.2732, -76.8867),
    MetroArea("Spokane", 47.6588, -117.426),
    MetroArea("Chattanooga", 35.0456, -85.3097),
    MetroArea("Scranton", 41.409, -75.6624),
    MetroArea("Modesto", 37.6391, -120.9969),
    MetroArea("Fayetteville AR", 36.0626, -94.1574),
    MetroArea("Youngstown", 41.0998, -80.6495),
    MetroArea("Lansing", 42.7325, -84.5555),
    MetroArea("Lancaster PA", 40.0379, -76.3055),
    MetroArea("Augusta GA", 33.4735, -82.0105),
    MetroArea("Portland ME", 43.6591, -70.2568),
    MetroArea("Santa Rosa", 38.4405, -122.7144),
    MetroArea("Lexington", 38.0406, -84.5037),
    MetroArea("Palm Bay", 28.0345, -80.5887),
    MetroArea("Corpus Christi", 27.8006, -97.3964),
    MetroArea("Fort Wayne", 41.0793, -85.1394),
    MetroArea("Pensacola", 30.4213, -87.2169),
    MetroArea("Reno", 39.5296, -119.8138),
    MetroArea("Santa Barbara", 34.4208, -119.6982),
    MetroArea("Anchorage", 61.2181, -149.9003),
    MetroArea("Savannah", 32.0809, -81.0912),
    MetroArea("Huntsville", 34.7304, -86.5861),
    MetroArea("Port St. Lucie", 27.273, -80.3582),
    MetroArea("Mobile", 30.6954, -88.0399),
    MetroArea("Ann Arbor", 42.2808, -83.743),
    MetroArea("Montgomery", 32.3668, -86.3),
    MetroArea("Salinas", 36.6777, -121.6555),

    # Smaller metros with active skate scenes
    MetroArea("Asheville", 35.5951, -82.5515),
    MetroArea("Boulder", 40.015, -105.2705),
    MetroArea("Santa Cruz", 36.9741, -122.0308),
    MetroArea("Burlington VT", 44.4759, -73.2121),
    MetroArea("Eugene", 44.0521, -123.0868),
    MetroArea("Bend", 44.0582, -121.3153),
    MetroArea("Fort Collins", 40.5853, -105.0844),
    MetroArea("Wilmington NC", 34.2257, -77.9447),
    MetroArea("Myrtle Beach", 33.6891, -78.8867),
    MetroArea("Charleston WV", 38.3498, -81.6326),

    # Additional cities for coverage gaps (151-220)
    # Mountain West
    MetroArea("Missoula", 46.8721, -113.994),
    MetroArea("Billings", 45.7833, -108.5007),
    MetroArea("Great Falls", 47.5053, -111.3008),
    MetroArea("Bozeman", 45.677, -111.0429),
    MetroArea("Casper", 42.8666, -106.3131),
    MetroArea("Cheyenne", 41.14, -104.8202),
    MetroArea("Laramie", 41.3114, -105.5911),
    MetroArea("Pocatello", 42.8713, -112.4455),
    MetroArea("Twin Falls", 42.5558, -114.4701),
    MetroArea("Idaho Falls", 43.4917, -112.0339),
    MetroArea("Flagstaff", 35.1983, -111.6513),
    MetroArea("Prescott", 34.54, -112.4685),
    MetroArea("Sierra Vista", 31.5455, -110.2773),
    MetroArea("Durango", 37.2753, -107.8801),
    MetroArea("Grand Junction", 39.0639, -108.5506),
    MetroArea("Pueblo", 38.2544, -104.6091),
    MetroArea("Santa Fe", 35.687, -105.9378),
    MetroArea("Las Cruces", 32.3199, -106.7637),
    MetroArea("Roswell", 33.3943, -104.523),
    MetroArea("St. George UT", 37.0965, -113.5684),
    MetroArea("Logan UT", 41.737, -111.8338),

    # Pacific Northwest / Northern California
    MetroArea("Bellingham", 48.7519, -122.4787),
    MetroArea("Olympia", 47.0379, -122.9007),
    MetroArea("Yakima", 46.6021, -120.5059),
    MetroArea("Tri-Cities WA", 46.2396, -119.2247),
    MetroArea("Medford", 42.3265, -122.8756),
    MetroArea("Salem", 44.9429, -123.0351),
    MetroArea("Redding", 40.5865, -122.3917),
    MetroArea("Chico", 39.7285, -121.8375),
    MetroArea("Eureka", 40.8021, -124.1637),
    MetroArea("Visalia", 36.3302, -119.2921),
    MetroArea("Monterey", 36.6002, -121.8947),
    MetroArea("San Luis Obispo", 35.2828, -120.6596),

    # Midwest / Great Plains
    MetroArea("Fargo", 46.8772, -96.7898),
    MetroArea("Sioux Falls", 43.5446, -96.7311),
    MetroArea("Rapid City", 44.0805, -103.231),
    MetroArea("Bismarck", 46.8083, -100.7837),
    MetroArea("Lincoln", 40.8258, -96.6852),
    MetroArea("Topeka", 39.0489, -95.678),
    MetroArea("Springfield MO", 37.209, -93.2923),
    MetroArea("Columbia MO", 38.9517, -92.3341),
    MetroArea("Cedar Rapids", 41.9779, -91.6656),
    MetroArea("Quad Cities", 41.5236, -90.5776),
    MetroArea("Peoria", 40.6936, -89.589),
    MetroArea("Champaign", 40.1164, -88.2434),
    MetroArea("Bloomington IN", 39.1653, -86.5264),
    MetroArea("South Bend", 41.6764, -86.252),
    MetroArea("Green Bay", 44.5133, -88.0133),
    MetroArea("Duluth", 46.7867, -92.1005),
    MetroArea("Rochester MN", 44.0121, -92.4802),
    MetroArea("La Crosse", 43.8014, -91.2396),

    # South / Southeast
    MetroArea("Shreveport", 32.5252, -93.7502),
    MetroArea("Lafayette LA", 30.2241, -92.0198),
    MetroArea("Lake Charles", 30.2266, -93.2174),
    MetroArea("Biloxi", 30.396, -88.8853),
    MetroArea("Tallahassee", 30.4383, -84.2807),
    MetroArea("Gainesville FL", 29.6516, -82.3248),
    MetroArea("Ocala", 29.1872, -82.1401),
    MetroArea("Panama City", 30.1588, -85.6602),
    MetroArea("Dothan", 31.2232, -85.3905),
    MetroArea("Columbus GA", 32.461, -84.9877),
    MetroArea("Macon", 32.8407, -83.6324),
    MetroArea("Athens GA", 33.9519, -83.3576),
    MetroArea("Florence SC", 34.1954, -79.7626),
    MetroArea("Fayetteville NC", 35.0527, -78.8784),
    MetroArea("Greenville NC", 35.6127, -77.3664),
    MetroArea("Roanoke", 37.271, -79.9414),
    MetroArea("Lynchburg", 37.4138, -79.1422),
    MetroArea("Charlottesville", 38.0293, -78.4767),
    MetroArea("Johnson City TN", 36.3134, -82.3535),

    # Texas
    MetroArea("Lubbock", 33.5779, -101.8552),
    MetroArea("Amarillo", 35.222, -101.8313),
    MetroArea("Midland", 31.9973, -102.0779),
    MetroArea("Abilene", 32.4487, -99.7331),
    MetroArea("Waco", 31.5493, -97.1467),
    MetroArea("Tyler", 32.3513, -95.3011),
    MetroArea("Beaumont", 30.0802, -94.1266),
    MetroArea("College Station", 30.628, -96.3344),
    MetroArea("Laredo", 27.5306, -99.4803),
    MetroArea("Brownsville", 25.9017, -97.4975),

    # Northeast / New England
    MetroArea("Manchester NH", 42.9956, -71.4548),
    MetroArea("Concord NH", 43.2081, -71.5376),
    MetroArea("Bangor", 44.8016, -68.7712),
    MetroArea("Lewiston ME", 44.1004, -70.2148),
    MetroArea("Ithaca", 42.444, -76.5019),
    MetroArea("Binghamton", 42.0987, -75.918),
    MetroArea("Utica", 43.1009, -75.2327),
    MetroArea("Plattsburgh", 44.6995, -73.4529),
    MetroArea("State College", 40.7934, -77.86),
    MetroArea("Erie", 42.1292, -80.0851),
    MetroArea("Wheeling", 40.064, -80.7209),
]
