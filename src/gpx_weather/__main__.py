from gpx_weather.cli import main

main()
