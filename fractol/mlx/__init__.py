"""XPM image loading, named colours and word splitting."""